# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered configuration loading: defaults, TOML files, then environment."""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import ValidationError

from .models import ConfigError, ResolverConfig

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
CONFIG_FILENAME: Final[str] = ".cmdresolver.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "cmdresolver"

ENVIRONMENT_FIELDS: Final[dict[str, str]] = {
    "CMDRESOLVER_PROBE_TIMEOUT": "probe_timeout",
    "CMDRESOLVER_LOOKUP_TIMEOUT": "lookup_timeout",
    "CMDRESOLVER_RUNTIME": "runtime_command",
    "CMDRESOLVER_RESOURCES_PATH": "resources_path",
}

_ENV_VAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$(?:\{([^}]+)\}|([A-Za-z_][A-Za-z0-9_]*))")


class ConfigSource(Protocol):
    """Source of a configuration fragment."""

    name: str

    def load(self) -> Mapping[str, Any]: ...

    def describe(self) -> str: ...


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_env_value(value: Any, env: Mapping[str, str]) -> Any:
    if isinstance(value, str):
        return _expand_env_string(value, env)
    if isinstance(value, Mapping):
        return {k: _expand_env_value(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env_value(v, env) for v in value]
    return value


def _expand_env_string(value: str, env: Mapping[str, str]) -> str:
    def _replace(match: re.Match[str]) -> str:
        key = match.group(1) or match.group(2)
        return env.get(key, match.group(0))

    return _ENV_VAR_PATTERN.sub(_replace, value)


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return ResolverConfig().to_dict()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, env: Mapping[str, str] | None = None) -> None:
        self._path = path
        self.name = str(path)
        self._env = env if env is not None else os.environ

    def load(self) -> Mapping[str, Any]:
        if not self._path.is_file():
            return {}
        try:
            with self._path.open("rb") as handle:
                data = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigError(f"Unable to read configuration at {self._path}: {exc}") from exc
        if not isinstance(data, MutableMapping):
            raise ConfigError(f"Configuration at {self._path} must be a table")
        return _expand_env_value(dict(data), self._env)

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.cmdresolver]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return dict(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


class EnvironmentConfigSource:
    """Read scalar overrides from ``CMDRESOLVER_*`` environment variables."""

    name = "environment"

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = env if env is not None else os.environ

    def load(self) -> Mapping[str, Any]:
        return {field: self._env[var] for var, field in ENVIRONMENT_FIELDS.items() if self._env.get(var)}

    def describe(self) -> str:
        return "Environment variables"


@dataclass(slots=True, frozen=True)
class ConfigLoadResult:
    """Loaded configuration plus the sources that contributed to it."""

    config: ResolverConfig
    sources: tuple[str, ...]


class ConfigLoader:
    """Merge configuration sources in order; later sources win."""

    def __init__(self, sources: list[ConfigSource]) -> None:
        self._sources = sources

    @classmethod
    def for_root(cls, root: Path, *, env: Mapping[str, str] | None = None) -> ConfigLoader:
        """Return a loader reading the standard files under ``root``."""

        environ = env if env is not None else os.environ
        return cls(
            [
                DefaultConfigSource(),
                PyProjectConfigSource(root / PYPROJECT_FILENAME, env=environ),
                TomlConfigSource(root / CONFIG_FILENAME, env=environ),
                EnvironmentConfigSource(environ),
            ],
        )

    def load(self) -> ResolverConfig:
        return self.load_with_trace().config

    def load_with_trace(self) -> ConfigLoadResult:
        """Return the merged configuration and the descriptions of non-empty sources.

        Raises:
            ConfigError: If a source cannot be read or the merged data is invalid.
        """

        merged: dict[str, Any] = {}
        contributing: list[str] = []
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            merged = _deep_merge(merged, fragment)
            contributing.append(source.describe())
        try:
            config = ResolverConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc
        return ConfigLoadResult(config=config, sources=tuple(contributing))


def load_config(root: Path | None = None, *, env: Mapping[str, str] | None = None) -> ResolverConfig:
    """Load the configuration that applies to ``root`` (default: working directory)."""

    return ConfigLoader.for_root(root or Path.cwd(), env=env).load()


__all__ = [
    "CONFIG_FILENAME",
    "ConfigLoadResult",
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "EnvironmentConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
]
