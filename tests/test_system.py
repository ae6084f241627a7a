# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the host-backed process runner and filesystem."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from cmdresolver.system import (
    TIMEOUT_EXIT_CODE,
    LocalFileSystem,
    SubprocessRunner,
)


def test_spawn_returns_exit_status() -> None:
    runner = SubprocessRunner()

    assert runner.spawn([sys.executable, "-c", "raise SystemExit(0)"], timeout=30) == 0
    assert runner.spawn([sys.executable, "-c", "raise SystemExit(3)"], timeout=30) == 3


def test_spawn_kills_child_after_timeout() -> None:
    runner = SubprocessRunner()

    status = runner.spawn([sys.executable, "-c", "import time; time.sleep(30)"], timeout=0.2)

    assert status == TIMEOUT_EXIT_CODE


def test_spawn_missing_executable_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        SubprocessRunner().spawn([str(tmp_path / "missing-binary")], timeout=1)


def test_spawn_rejects_empty_command() -> None:
    with pytest.raises(ValueError, match="at least one argument"):
        SubprocessRunner().spawn([])


def test_run_captures_text_output() -> None:
    completed = SubprocessRunner().run([sys.executable, "-c", "print('hello')"], timeout=30)

    assert completed.returncode == 0
    assert completed.stdout.strip() == "hello"


def test_run_timeout_maps_to_timeout_exit_code() -> None:
    completed = SubprocessRunner().run([sys.executable, "-c", "import time; time.sleep(30)"], timeout=0.2)

    assert completed.returncode == TIMEOUT_EXIT_CODE
    assert "timed out" in completed.stderr


def test_local_filesystem_queries(tmp_path: Path) -> None:
    (tmp_path / "node").write_text("", encoding="utf-8")
    (tmp_path / "v20.1.0").mkdir()
    fs = LocalFileSystem()

    assert fs.exists(str(tmp_path / "node")) is True
    assert fs.exists(str(tmp_path / "missing")) is False
    assert sorted(fs.listdir(str(tmp_path))) == ["node", "v20.1.0"]
    with pytest.raises(OSError):
        fs.listdir(str(tmp_path / "missing"))
