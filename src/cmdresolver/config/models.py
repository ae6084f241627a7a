# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for command resolution."""

from __future__ import annotations

import sys
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..resolution.bundled import DEFAULT_BUNDLED_PACKAGES
from ..resolution.lookup import DEFAULT_LOOKUP_TIMEOUT
from ..resolution.probe import DEFAULT_PROBE_ARGUMENT, DEFAULT_PROBE_TIMEOUT


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ResolverConfig(BaseModel):
    """Tunable behaviour of a :class:`~cmdresolver.resolver.Resolver`."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    probe_timeout: float = Field(default=DEFAULT_PROBE_TIMEOUT, gt=0)
    lookup_timeout: float = Field(default=DEFAULT_LOOKUP_TIMEOUT, gt=0)
    probe_argument: str = Field(default=DEFAULT_PROBE_ARGUMENT, min_length=1)
    runtime_command: str = Field(default="node", min_length=1)
    bundle_roots: list[Path] = Field(default_factory=list)
    resources_path: Path | None = None
    extra_search_paths: dict[str, list[str]] = Field(default_factory=dict)
    bundled_packages: list[str] = Field(default_factory=list)
    cache_max_entries: int | None = Field(default=None, ge=1)

    def effective_resources_path(self) -> Path | None:
        """Return the packaged-distribution resource directory, when there is one.

        An explicit ``resources_path`` wins; otherwise a frozen (PyInstaller style)
        interpreter exposes its unpacked resources through ``sys._MEIPASS``.
        """

        if self.resources_path is not None:
            return self.resources_path
        bundle_dir = getattr(sys, "_MEIPASS", None)
        return Path(bundle_dir) if bundle_dir else None

    def all_bundled_packages(self) -> list[str]:
        """Return the built-in bundled packages followed by configured additions."""

        return list(dict.fromkeys([*DEFAULT_BUNDLED_PACKAGES, *self.bundled_packages]))

    def to_dict(self) -> dict[str, object]:
        return self.model_dump(mode="json")


__all__ = ["ConfigError", "ResolverConfig"]
