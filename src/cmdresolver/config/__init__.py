# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from .loader import CONFIG_FILENAME, ConfigLoader, ConfigLoadResult, load_config
from .models import ConfigError, ResolverConfig

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ConfigLoadResult",
    "ConfigLoader",
    "ResolverConfig",
    "load_config",
]
