# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate commands on ``PATH`` through the platform's own lookup facility."""

from __future__ import annotations

import logging
import subprocess  # nosec B404
from typing import Final

from ..interfaces import ProcessRunner
from ..platform import HostPlatform

LOGGER = logging.getLogger(__name__)

DEFAULT_LOOKUP_TIMEOUT: Final[float] = 5.0


class PathLookup:
    """Run ``which`` (POSIX) or ``where`` (Windows) and keep the first match."""

    def __init__(
        self,
        runner: ProcessRunner,
        platform: HostPlatform,
        *,
        timeout: float = DEFAULT_LOOKUP_TIMEOUT,
    ) -> None:
        self._runner = runner
        self._platform = platform
        self._timeout = timeout

    def locate(self, command: str, timeout: float | None = None) -> str | None:
        """Return the absolute path the shell would run for ``command``.

        Args:
            command: Bare command name to look up.
            timeout: Optional override of the configured timeout in seconds.

        Returns:
            str | None: First reported path, or ``None`` when the lookup failed.
        """

        limit = self._timeout if timeout is None else timeout
        locator = self._platform.locate_command
        try:
            completed = self._runner.run([locator, command], timeout=limit)
        except (OSError, ValueError, subprocess.SubprocessError) as exc:
            LOGGER.debug("%s %s could not run: %s", locator, command, exc)
            return None
        except Exception:  # noqa: BLE001
            LOGGER.warning("%s %s raised unexpectedly", locator, command, exc_info=True)
            return None
        if completed.returncode != 0:
            LOGGER.debug("%s %s exited with status %s", locator, command, completed.returncode)
            return None
        lines = [line.strip() for line in (completed.stdout or "").splitlines() if line.strip()]
        if not lines:
            return None
        return lines[0]


__all__ = ["DEFAULT_LOOKUP_TIMEOUT", "PathLookup"]
