# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Building blocks of command resolution: probes, lookups, fallbacks and caches."""

from __future__ import annotations

from .bundled import BundledRegistry, BundleSearchRoots, package_identity, registry_key
from .cache import ResolutionCache, cache_key
from .fallback import FallbackPathSearch, expand_environment, order_version_entries
from .instructions import get_installation_instructions
from .lookup import PathLookup
from .models import (
    BundledServerEntry,
    CommandResolution,
    FallbackCandidate,
    FallbackUsed,
    InstallAction,
    InstallationInstructions,
)
from .probe import AvailabilityProbe

__all__ = [
    "AvailabilityProbe",
    "BundleSearchRoots",
    "BundledRegistry",
    "BundledServerEntry",
    "CommandResolution",
    "FallbackCandidate",
    "FallbackPathSearch",
    "FallbackUsed",
    "InstallAction",
    "InstallationInstructions",
    "PathLookup",
    "ResolutionCache",
    "cache_key",
    "expand_environment",
    "get_installation_instructions",
    "order_version_entries",
    "package_identity",
    "registry_key",
]
