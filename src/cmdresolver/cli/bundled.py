# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``bundled`` command: list the bundled-server registry."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from ..logging import info
from ..resolver import Resolver
from .rendering import build_bundled_table
from .shared import CLIError, prepare_resolver, print_json, render_error


def run_bundled(
    root: Path,
    *,
    as_json: bool = False,
    console: Console | None = None,
    resolver: Resolver | None = None,
) -> int:
    """Render every known bundled server and where its entry point was found."""

    console = console or Console()
    try:
        active = resolver or prepare_resolver(root)
    except CLIError as exc:
        return render_error(console, exc)

    entries = active.get_bundled_servers()
    if as_json:
        print_json(console, {key: entry.model_dump(mode="json") for key, entry in entries.items()})
    else:
        console.print(build_bundled_table(entries))
        shipped = sum(1 for entry in entries.values() if entry.bundled_path)
        info(f"{shipped} of {len(entries)} bundled servers shipped", use_emoji=True)
    return 0


def bundled_command(
    json_output: Annotated[bool, typer.Option("--json", help="Emit JSON.")] = False,
    root: Path = typer.Option(Path.cwd(), "--root", "-r", help="Project root."),
) -> None:
    """List bundled MCP servers."""

    raise typer.Exit(code=run_bundled(root, as_json=json_output))


__all__ = ["bundled_command", "run_bundled"]
