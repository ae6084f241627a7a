# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Well-known installation directories for interpreter and package-runner toolchains.

Templates may reference environment variables as ``${NAME}`` and may contain a
single ``*`` path segment standing for a version-manager's per-version
directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ..platform import PlatformName


@dataclass(frozen=True, slots=True)
class Toolchain:
    """Commands shipped together and the directories they are installed into."""

    name: str
    commands: frozenset[str]
    directories: dict[PlatformName, tuple[str, ...]]

    def directories_for(self, platform: PlatformName) -> tuple[str, ...]:
        return self.directories.get(platform, self.directories[PlatformName.LINUX])


NODE_TOOLCHAIN: Final[Toolchain] = Toolchain(
    name="node",
    commands=frozenset({"node", "npx", "npm"}),
    directories={
        PlatformName.LINUX: (
            "/usr/local/bin",
            "/usr/bin",
            "/opt/node/bin",
            "${HOME}/.nvm/current/bin",
            "${HOME}/.volta/bin",
            "${HOME}/.local/bin",
            "${HOME}/.nvm/versions/node/*/bin",
        ),
        PlatformName.DARWIN: (
            "/usr/local/bin",
            "/opt/homebrew/bin",
            "/usr/bin",
            "${HOME}/.nvm/current/bin",
            "${HOME}/.volta/bin",
            "${HOME}/.nvm/versions/node/*/bin",
        ),
        PlatformName.WINDOWS: (
            "C:\\Program Files\\nodejs",
            "C:\\Program Files (x86)\\nodejs",
            "${APPDATA}\\npm",
            "${LOCALAPPDATA}\\npm",
            "${USERPROFILE}\\AppData\\Roaming\\npm",
            "${LOCALAPPDATA}\\nvm\\current",
            "${LOCALAPPDATA}\\nvm\\*",
            "${APPDATA}\\nvm\\current",
            "${APPDATA}\\nvm\\*",
            "${NVM_HOME}\\current",
            "${NVM_HOME}\\*",
        ),
    },
)

UV_TOOLCHAIN: Final[Toolchain] = Toolchain(
    name="uv",
    commands=frozenset({"uv", "uvx"}),
    directories={
        PlatformName.LINUX: (
            "${HOME}/.local/bin",
            "${HOME}/.cargo/bin",
            "/usr/local/bin",
            "/usr/bin",
        ),
        PlatformName.DARWIN: (
            "${HOME}/.local/bin",
            "${HOME}/.cargo/bin",
            "/opt/homebrew/bin",
            "/usr/local/bin",
        ),
        PlatformName.WINDOWS: (
            "${USERPROFILE}\\.local\\bin",
            "${USERPROFILE}\\.cargo\\bin",
            "${LOCALAPPDATA}\\uv",
        ),
    },
)

PYTHON_TOOLCHAIN: Final[Toolchain] = Toolchain(
    name="python",
    commands=frozenset({"python", "python3"}),
    directories={
        PlatformName.LINUX: (
            "/usr/local/bin",
            "/usr/bin",
            "${HOME}/.pyenv/shims",
            "${HOME}/.pyenv/versions/*/bin",
        ),
        PlatformName.DARWIN: (
            "/opt/homebrew/bin",
            "/usr/local/bin",
            "/usr/bin",
            "${HOME}/.pyenv/shims",
            "${HOME}/.pyenv/versions/*/bin",
            "/Library/Frameworks/Python.framework/Versions/*/bin",
        ),
        PlatformName.WINDOWS: (
            "${LOCALAPPDATA}\\Programs\\Python\\*",
            "${USERPROFILE}\\.pyenv\\pyenv-win\\versions\\*",
        ),
    },
)

TOOLCHAINS: Final[tuple[Toolchain, ...]] = (NODE_TOOLCHAIN, UV_TOOLCHAIN, PYTHON_TOOLCHAIN)


def toolchain_for(command: str) -> Toolchain | None:
    """Return the toolchain that ships ``command``, if it is a known one."""

    for toolchain in TOOLCHAINS:
        if command in toolchain.commands:
            return toolchain
    return None


__all__ = [
    "NODE_TOOLCHAIN",
    "PYTHON_TOOLCHAIN",
    "TOOLCHAINS",
    "Toolchain",
    "UV_TOOLCHAIN",
    "toolchain_for",
]
