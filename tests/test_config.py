# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for layered resolver configuration."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from cmdresolver.config import CONFIG_FILENAME, ConfigError, ConfigLoader, ResolverConfig, load_config
from cmdresolver.resolution.bundled import DEFAULT_BUNDLED_PACKAGES


def test_defaults_without_any_files(tmp_path: Path) -> None:
    config = load_config(tmp_path, env={})

    assert config == ResolverConfig()
    assert config.probe_timeout == 5.0
    assert config.lookup_timeout == 5.0
    assert config.probe_argument == "--version"
    assert config.runtime_command == "node"
    assert config.cache_max_entries is None


def test_pyproject_section_is_applied(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.cmdresolver]\nprobe_timeout = 2.5\nbundle_roots = ["vendor"]\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path, env={})

    assert config.probe_timeout == 2.5
    assert config.bundle_roots == [Path("vendor")]


def test_dedicated_file_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.cmdresolver]\nprobe_timeout = 2.5\n", encoding="utf-8")
    (tmp_path / CONFIG_FILENAME).write_text(
        'probe_timeout = 1.0\nruntime_command = "bun"\n\n[extra_search_paths]\nnode = ["${TOOLS}/node"]\n',
        encoding="utf-8",
    )

    result = ConfigLoader.for_root(tmp_path, env={"TOOLS": "/opt/tools"}).load_with_trace()

    assert result.config.probe_timeout == 1.0
    assert result.config.runtime_command == "bun"
    assert result.config.extra_search_paths == {"node": ["/opt/tools/node"]}
    assert result.sources[0] == "Built-in defaults"
    assert len(result.sources) == 3


def test_environment_overrides_files(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("probe_timeout = 1.0\n", encoding="utf-8")

    config = load_config(
        tmp_path,
        env={"CMDRESOLVER_PROBE_TIMEOUT": "0.25", "CMDRESOLVER_RUNTIME": "nodejs"},
    )

    assert config.probe_timeout == 0.25
    assert config.runtime_command == "nodejs"


def test_invalid_value_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("probe_timeout = -1\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(tmp_path, env={})


def test_unknown_key_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("probe_timout = 1\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path, env={})


def test_malformed_toml_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("probe_timeout = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Unable to read configuration"):
        load_config(tmp_path, env={})


def test_configured_packages_extend_defaults() -> None:
    config = ResolverConfig(bundled_packages=["custom-server", DEFAULT_BUNDLED_PACKAGES[0]])

    assert config.all_bundled_packages() == [*DEFAULT_BUNDLED_PACKAGES, "custom-server"]


def test_frozen_interpreter_supplies_resources_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "_MEIPASS", "/tmp/bundle", raising=False)

    assert ResolverConfig().effective_resources_path() == Path("/tmp/bundle")
    assert ResolverConfig(resources_path=Path("/srv/res")).effective_resources_path() == Path("/srv/res")


def test_no_resources_path_outside_frozen_apps(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delattr(sys, "_MEIPASS", raising=False)

    assert ResolverConfig().effective_resources_path() is None
