# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``install-help`` command: print installation guidance for a command."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from ..resolution.instructions import get_installation_instructions
from .rendering import build_instructions_panel
from .shared import print_json


def run_install_help(command: str, *, as_json: bool = False, console: Console | None = None) -> int:
    console = console or Console()
    instructions = get_installation_instructions(command)
    if as_json:
        print_json(console, instructions.model_dump(mode="json", exclude_none=True))
    else:
        console.print(build_instructions_panel(instructions))
    return 0


def install_help_command(
    command: Annotated[str, typer.Argument(..., help="Command that is missing.")],
    json_output: Annotated[bool, typer.Option("--json", help="Emit JSON.")] = False,
) -> None:
    """Show how to install a missing command."""

    raise typer.Exit(code=run_install_help(command, as_json=json_output))


__all__ = ["install_help_command", "run_install_help"]
