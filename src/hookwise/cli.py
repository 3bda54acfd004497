# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Command line entry point for running hooks from git."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .config import ConfigError, Configuration, load_config
from .context import HookContext
from .git import GitRepository, NotAGitRepositoryError
from .hooks.registry import HookRegistry
from .logging import fail, plain
from .naming import camel_case
from .results import ExitCode
from .runner import HookRunner, default_parallel_jobs

app = typer.Typer(
    name="hookwise",
    help="Run git hooks that only block on problems the change introduced.",
    add_completion=False,
    no_args_is_help=True,
)


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = ExitCode.FAILURE) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = int(exit_code)


def _discover(root: Path) -> GitRepository:
    try:
        return GitRepository.discover(root)
    except NotAGitRepositoryError as exc:
        raise CLIError(str(exc), exit_code=ExitCode.UNAVAILABLE) from exc


def _load(root: Path) -> Configuration:
    try:
        return load_config(root)
    except ConfigError as exc:
        raise CLIError(f"Invalid configuration: {exc}", exit_code=ExitCode.USAGE) from exc


def _run(
    context_name: str,
    root: Path,
    *,
    jobs: int,
    commit_msg_file: Path | None,
    use_emoji: bool,
) -> int:
    repository = _discover(root)
    config = _load(repository.root)
    name = camel_case(context_name)
    if not config.has_context(name):
        known = ", ".join(config.context_names())
        raise CLIError(f"Unknown hook context '{context_name}' (expected one of: {known})", exit_code=ExitCode.USAGE)
    context = HookContext.from_repository(name, repository, commit_message_file=commit_msg_file)
    registry = HookRegistry.for_configuration(config, repository.root)
    runner = HookRunner(config=config, context=context, registry=registry, jobs=jobs, use_emoji=use_emoji)
    return runner.run().exit_code


@app.command("run")
def run_command(
    context_name: Annotated[str, typer.Argument(metavar="CONTEXT", help="Hook context, e.g. pre-commit or commit-msg.")],
    root: Annotated[Path, typer.Option("--root", help="Directory inside the repository.")] = Path("."),
    jobs: Annotated[int | None, typer.Option("--jobs", "-j", min=1, help="Maximum hooks to run in parallel.")] = None,
    commit_msg_file: Annotated[
        Path | None,
        typer.Option("--commit-msg-file", help="Commit message file passed by git to commit-msg hooks."),
    ] = None,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in output.")] = False,
) -> None:
    """Run every enabled hook for CONTEXT."""

    try:
        code = _run(
            context_name,
            root.resolve(),
            jobs=jobs or default_parallel_jobs(),
            commit_msg_file=commit_msg_file,
            use_emoji=not no_emoji,
        )
    except CLIError as exc:
        fail(str(exc), use_emoji=not no_emoji)
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=code)


@app.command("list-hooks")
def list_hooks(
    root: Annotated[Path, typer.Option("--root", help="Directory inside the repository.")] = Path("."),
) -> None:
    """List configured hooks and whether each is enabled."""

    try:
        repository = _discover(root.resolve())
        config = _load(repository.root)
    except CLIError as exc:
        fail(str(exc), use_emoji=False)
        raise typer.Exit(code=exc.exit_code) from exc

    for context_name in config.context_names():
        plain(f"{context_name}:")
        for hook_name in config.enabled_hooks(context_name):
            state = "enabled" if config.hook_enabled(context_name, hook_name) else "disabled"
            plain(f"  {hook_name}: {state}")


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["CLIError", "app", "main"]
