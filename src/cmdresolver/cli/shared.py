# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared utilities for CLI commands (errors, resolver construction, JSON output)."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..config import ConfigError
from ..logging import enable_verbose_logging
from ..resolver import Resolver, build_resolver


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def prepare_resolver(root: Path, *, verbose: bool = False) -> Resolver:
    """Return a resolver configured for ``root``.

    Args:
        root: Directory whose configuration files and ``node_modules`` apply.
        verbose: Stream debug logging to stderr while resolving.

    Returns:
        Resolver: Resolver ready for use.

    Raises:
        CLIError: If the configuration cannot be loaded.
    """

    if verbose:
        enable_verbose_logging()
    try:
        return build_resolver(root.resolve())
    except ConfigError as exc:
        raise CLIError(f"Failed to load configuration: {exc}") from exc


def render_error(console: Console, exc: CLIError) -> int:
    console.print(Panel(f"[red]{escape(str(exc))}[/red]", border_style="red"))
    return exc.exit_code


def print_json(console: Console, payload: Mapping[str, object] | list[object]) -> None:
    console.print_json(json.dumps(payload))


__all__ = ["CLIError", "prepare_resolver", "print_json", "render_error"]
