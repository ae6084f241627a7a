# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``resolve`` command: show how a command would be launched."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from ..logging import fail, ok, warn
from ..resolver import Resolver
from .rendering import build_instructions_panel, build_resolution_table
from .shared import CLIError, prepare_resolver, print_json, render_error


def run_resolve(
    command: str,
    args: Sequence[str],
    root: Path,
    *,
    as_json: bool = False,
    verbose: bool = False,
    console: Console | None = None,
    resolver: Resolver | None = None,
) -> int:
    """Resolve ``command`` with ``args`` and render the outcome.

    Args:
        command: Logical command name to resolve.
        args: Arguments the command would be launched with.
        root: Directory supplying configuration and bundled packages.
        as_json: Emit the resolution as JSON instead of a table.
        verbose: Stream debug logging to stderr.
        console: Optional ``rich`` console for output rendering.
        resolver: Optional preconfigured resolver.

    Returns:
        int: ``0`` when the command is available, ``1`` otherwise.
    """

    console = console or Console()
    try:
        active = resolver or prepare_resolver(root, verbose=verbose)
    except CLIError as exc:
        return render_error(console, exc)

    resolution = active.resolve_command(command, list(args))
    if as_json:
        print_json(console, resolution.model_dump(mode="json"))
        return 0 if resolution.available else 1

    console.print(build_resolution_table(resolution))
    if resolution.available:
        if resolution.fallback_used is not None:
            warn(f"'{command}' is not on PATH; using {resolution.fallback_used.value}", use_emoji=True)
        ok(f"'{command}' can be launched", use_emoji=True)
        return 0
    fail(f"'{command}' could not be resolved", use_emoji=True)
    console.print(build_instructions_panel(active.get_installation_instructions(command)))
    return 1


def resolve_command(
    command: Annotated[str, typer.Argument(..., help="Command to resolve, e.g. npx.")],
    args: Annotated[list[str] | None, typer.Argument(help="Arguments passed to the command.")] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Emit JSON.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log each probe and candidate.")] = False,
    root: Path = typer.Option(Path.cwd(), "--root", "-r", help="Project root."),
) -> None:
    """Typer entry point mirroring :func:`run_resolve`."""

    exit_code = run_resolve(command, args or [], root, as_json=json_output, verbose=verbose)
    raise typer.Exit(code=exit_code)


__all__ = ["resolve_command", "run_resolve"]
