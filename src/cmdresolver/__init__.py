# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve auxiliary tool commands to launchable executables."""

from __future__ import annotations

from importlib import metadata

from .config import ConfigError, ResolverConfig, load_config
from .resolution import (
    BundledServerEntry,
    CommandResolution,
    FallbackUsed,
    InstallAction,
    InstallationInstructions,
    get_installation_instructions,
)
from .resolver import Resolver, build_resolver

__all__ = [
    "BundledServerEntry",
    "CommandResolution",
    "ConfigError",
    "FallbackUsed",
    "InstallAction",
    "InstallationInstructions",
    "Resolver",
    "ResolverConfig",
    "__version__",
    "build_resolver",
    "get_installation_instructions",
    "load_config",
]

try:
    __version__ = metadata.version("cmdresolver")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
