# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host platform detection and path conventions used during resolution."""

from __future__ import annotations

import ntpath
import posixpath
import sys
from dataclasses import dataclass, field
from enum import StrEnum
from types import ModuleType
from typing import Final


class PlatformName(StrEnum):
    """Operating system families with distinct lookup conventions."""

    LINUX = "linux"
    DARWIN = "darwin"
    WINDOWS = "win32"


WINDOWS_EXECUTABLE_EXTENSIONS: Final[tuple[str, ...]] = (".exe", ".cmd", ".bat")

_PLATFORM_ALIASES: Final[dict[str, PlatformName]] = {
    "linux": PlatformName.LINUX,
    "darwin": PlatformName.DARWIN,
    "win32": PlatformName.WINDOWS,
    "cygwin": PlatformName.WINDOWS,
}


@dataclass(frozen=True, slots=True)
class HostPlatform:
    """Path and lookup conventions for a single operating system family.

    Attributes:
        name: Platform family governing which tables and lookup commands apply.
        pathmod: ``ntpath`` or ``posixpath`` used for joining and splitting paths,
            so Windows behaviour can be exercised from any host.
    """

    name: PlatformName
    pathmod: ModuleType = field(default=posixpath)

    @property
    def is_windows(self) -> bool:
        return self.name is PlatformName.WINDOWS

    @property
    def path_separator(self) -> str:
        """Return the separator used between ``PATH`` entries."""

        return ";" if self.is_windows else ":"

    @property
    def locate_command(self) -> str:
        """Return the shell facility that finds commands on ``PATH``."""

        return "where" if self.is_windows else "which"

    def join(self, *parts: str) -> str:
        return self.pathmod.join(*parts)

    def split_path_env(self, value: str | None) -> list[str]:
        """Return the non-blank directories listed in a ``PATH`` value.

        Args:
            value: Raw ``PATH`` contents, possibly ``None`` or empty.

        Returns:
            list[str]: Directories in declaration order with whitespace trimmed.
        """

        if not value:
            return []
        return [entry.strip() for entry in value.split(self.path_separator) if entry.strip()]

    def executable_names(self, command: str) -> list[str]:
        """Return the file names ``command`` may carry on this platform."""

        if not self.is_windows:
            return [command]
        if command.lower().endswith(WINDOWS_EXECUTABLE_EXTENSIONS):
            return [command]
        return [f"{command}{extension}" for extension in WINDOWS_EXECUTABLE_EXTENSIONS]


def platform_for(name: str | PlatformName) -> HostPlatform:
    """Return the :class:`HostPlatform` for ``name``, treating unknown systems as Linux."""

    resolved = name if isinstance(name, PlatformName) else _PLATFORM_ALIASES.get(str(name), PlatformName.LINUX)
    pathmod = ntpath if resolved is PlatformName.WINDOWS else posixpath
    return HostPlatform(name=resolved, pathmod=pathmod)


def detect_platform() -> HostPlatform:
    """Return the conventions for the interpreter's operating system."""

    return platform_for(sys.platform)


__all__ = [
    "HostPlatform",
    "PlatformName",
    "WINDOWS_EXECUTABLE_EXTENSIONS",
    "detect_platform",
    "platform_for",
]
