# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Default process and filesystem facilities backed by the running host."""

from __future__ import annotations

import os

# Bandit: subprocess usage is intentional; commands are passed as argument lists
# and ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Sequence
from subprocess import CompletedProcess
from typing import Final

from .interfaces import FileSystem, ProcessRunner

TIMEOUT_EXIT_CODE: Final[int] = 124


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)
    return [str(part) for part in args]


def _ensure_text(value: str | bytes | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.decode(errors="ignore")


class SubprocessRunner(ProcessRunner):
    """Run commands through :mod:`subprocess` without shell expansion."""

    def spawn(self, args: Sequence[str], *, timeout: float | None = None) -> int:
        normalized = _normalize_args(args)
        # Bandit: argument lists only, no shell expansion.
        process = subprocess.Popen(  # nosec B603
            normalized,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        try:
            return process.wait(timeout=timeout)
        except subprocess.TimeoutExpired:
            process.kill()
            process.wait()
            return TIMEOUT_EXIT_CODE

    def run(self, args: Sequence[str], *, timeout: float | None = None) -> CompletedProcess[str]:
        normalized = _normalize_args(args)
        try:
            # Bandit: argument lists only, no shell expansion.
            return subprocess.run(  # nosec B603
                normalized,
                check=False,
                capture_output=True,
                text=True,
                timeout=timeout,
                stdin=subprocess.DEVNULL,
            )
        except subprocess.TimeoutExpired as exc:
            stderr = _ensure_text(exc.stderr)
            timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
            return subprocess.CompletedProcess(
                args=normalized,
                returncode=TIMEOUT_EXIT_CODE,
                stdout=_ensure_text(exc.stdout) or "",
                stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
            )


class LocalFileSystem(FileSystem):
    """Query the host filesystem through :mod:`os`."""

    def exists(self, path: str) -> bool:
        try:
            return os.path.exists(path)
        except (OSError, ValueError):
            return False

    def listdir(self, path: str) -> list[str]:
        return os.listdir(path)


__all__ = [
    "LocalFileSystem",
    "SubprocessRunner",
    "TIMEOUT_EXIT_CODE",
]
