# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models produced and consumed by command resolution."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class FallbackUsed(StrEnum):
    """Strategy that produced a successful resolution."""

    NONE = "none"
    BUNDLED_SERVER = "bundled-server"
    SYSTEM_PATH = "system-path"


class CommandResolution(BaseModel):
    """Outcome of determining whether and how a command can be executed."""

    model_config = ConfigDict(frozen=True)

    command: str
    args: tuple[str, ...] = Field(default_factory=tuple)
    available: bool
    resolved_path: str | None = None
    fallback_used: FallbackUsed | None = None

    @classmethod
    def unavailable(cls, command: str, args: Sequence[str]) -> CommandResolution:
        """Return the resolution reported when every strategy failed."""

        return cls(command=command, args=tuple(args), available=False)

    @property
    def executable(self) -> str:
        """Return the program a launcher should start for this resolution."""

        if self.fallback_used is FallbackUsed.SYSTEM_PATH and self.resolved_path:
            return self.resolved_path
        return self.command

    def argv(self) -> list[str]:
        """Return the full argument vector, executable first."""

        return [self.executable, *self.args]


class BundledServerEntry(BaseModel):
    """Locally shipped copy of an adapter package known to the registry."""

    model_config = ConfigDict(frozen=True)

    command: str
    args: tuple[str, ...] = Field(default_factory=tuple)
    package_name: str
    bundled_path: str | None = None


@dataclass(frozen=True, slots=True)
class FallbackCandidate:
    """Filesystem location tried when the platform lookup fails.

    Attributes:
        path_template: Fully expanded path, possibly holding one ``*`` segment.
        requires_glob_expansion: ``True`` when ``path_template`` holds a ``*`` segment.
    """

    path_template: str
    requires_glob_expansion: bool = False

    @classmethod
    def from_path(cls, path: str) -> FallbackCandidate:
        return cls(path_template=path, requires_glob_expansion="*" in path)


class InstallAction(BaseModel):
    """Single suggestion offered to a user missing a command."""

    model_config = ConfigDict(frozen=True)

    label: str
    url: str | None = None
    command: str | None = None


class InstallationInstructions(BaseModel):
    """Descriptive guidance rendered when a command cannot be resolved."""

    model_config = ConfigDict(frozen=True)

    title: str
    message: str
    actions: tuple[InstallAction, ...] = Field(default_factory=tuple)


__all__ = [
    "BundledServerEntry",
    "CommandResolution",
    "FallbackCandidate",
    "FallbackUsed",
    "InstallAction",
    "InstallationInstructions",
]
