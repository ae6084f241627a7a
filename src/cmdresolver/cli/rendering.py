# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich renderables for resolutions, bundled servers and install guidance."""

from __future__ import annotations

from collections.abc import Mapping

from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..resolution.models import (
    BundledServerEntry,
    CommandResolution,
    FallbackUsed,
    InstallationInstructions,
)


def build_resolution_table(resolution: CommandResolution) -> Table:
    """Return a table describing ``resolution`` field by field."""

    table = Table(title="Resolution", box=box.SIMPLE, expand=True)
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")

    status = "[green]available[/]" if resolution.available else "[red]unavailable[/]"
    table.add_row("Status", status)
    table.add_row("Command", resolution.command)
    table.add_row("Arguments", " ".join(resolution.args) or "-")
    table.add_row("Resolved Path", resolution.resolved_path or "-")
    table.add_row("Fallback", (resolution.fallback_used or FallbackUsed.NONE).value)
    if resolution.available:
        table.add_row("Launch", " ".join(resolution.argv()))
    return table


def build_bundled_table(entries: Mapping[str, BundledServerEntry]) -> Table:
    table = Table(title="Bundled Servers", box=box.SIMPLE, expand=True)
    table.add_column("Key", style="bold")
    table.add_column("Package")
    table.add_column("Status")
    table.add_column("Entry Point", overflow="fold")
    for key, entry in sorted(entries.items()):
        state = "[green]bundled[/]" if entry.bundled_path else "[yellow]not shipped[/]"
        table.add_row(key, entry.package_name, state, entry.bundled_path or "-")
    return table


def build_instructions_panel(instructions: InstallationInstructions) -> Panel:
    """Return a panel rendering installation guidance and its suggested actions."""

    lines = [escape(instructions.message)]
    if instructions.actions:
        lines.append("")
    for action in instructions.actions:
        detail = escape(action.url or action.command or "")
        lines.append(f"• [bold]{escape(action.label)}[/bold]: {detail}" if detail else f"• {escape(action.label)}")
    return Panel("\n".join(lines), title=instructions.title, border_style="yellow")


__all__ = ["build_bundled_table", "build_instructions_panel", "build_resolution_table"]
