# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .bundled import bundled_command
from .install_help import install_help_command
from .resolve import resolve_command

app = typer.Typer(help="Resolve MCP server commands to launchable executables.", no_args_is_help=True)

app.command(
    name="resolve",
    context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True},
)(resolve_command)
app.command(name="bundled")(bundled_command)
app.command(name="install-help")(install_help_command)

__all__ = ["app"]
