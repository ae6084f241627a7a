# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Curated installation guidance for commands that could not be resolved."""

from __future__ import annotations

from typing import Final

from .models import InstallAction, InstallationInstructions

_NODE_GUIDANCE: Final[InstallationInstructions] = InstallationInstructions(
    title="Node.js Required",
    message=(
        "MCP servers require Node.js and npm to be installed on your system. "
        "Node.js includes npx which is used to run MCP servers."
    ),
    actions=(
        InstallAction(label="Download Node.js", url="https://nodejs.org/en/download/"),
        InstallAction(label="Install via Homebrew (macOS)", command="brew install node"),
        InstallAction(label="Install via package manager (Linux)", command="sudo apt install nodejs npm"),
        InstallAction(label="Install via winget (Windows)", command="winget install OpenJS.NodeJS.LTS"),
    ),
)

_UV_GUIDANCE: Final[InstallationInstructions] = InstallationInstructions(
    title="uv Required",
    message=(
        "Python-based MCP servers are launched with uvx, which ships with the uv package manager. "
        "Install uv and make sure its bin directory is on your PATH."
    ),
    actions=(
        InstallAction(label="Read the uv installation guide", url="https://docs.astral.sh/uv/getting-started/installation/"),
        InstallAction(
            label="Install via installer script (macOS/Linux)",
            command="curl -LsSf https://astral.sh/uv/install.sh | sh",
        ),
        InstallAction(label="Install via Homebrew (macOS)", command="brew install uv"),
        InstallAction(
            label="Install via PowerShell (Windows)",
            command='powershell -ExecutionPolicy ByPass -c "irm https://astral.sh/uv/install.ps1 | iex"',
        ),
    ),
)

_PYTHON_GUIDANCE: Final[InstallationInstructions] = InstallationInstructions(
    title="Python Required",
    message="This server needs a Python 3 interpreter available on your PATH.",
    actions=(
        InstallAction(label="Download Python", url="https://www.python.org/downloads/"),
        InstallAction(label="Install via Homebrew (macOS)", command="brew install python"),
        InstallAction(label="Install via package manager (Linux)", command="sudo apt install python3"),
    ),
)

CURATED_INSTRUCTIONS: Final[dict[str, InstallationInstructions]] = {
    "npx": _NODE_GUIDANCE,
    "npm": _NODE_GUIDANCE,
    "node": _NODE_GUIDANCE,
    "uvx": _UV_GUIDANCE,
    "uv": _UV_GUIDANCE,
    "python": _PYTHON_GUIDANCE,
    "python3": _PYTHON_GUIDANCE,
}


def get_installation_instructions(command: str) -> InstallationInstructions:
    """Return user-facing guidance for installing ``command``.

    Args:
        command: Command name that could not be resolved.

    Returns:
        InstallationInstructions: Curated guidance for well-known commands, or a
        generic "not found" message without actions.
    """

    curated = CURATED_INSTRUCTIONS.get(command)
    if curated is not None:
        return curated
    return InstallationInstructions(
        title=f"{command} Not Found",
        message=(
            f"The command '{command}' was not found on your system. "
            "Please install it and ensure it's available in your PATH."
        ),
    )


__all__ = ["CURATED_INSTRUCTIONS", "get_installation_instructions"]
