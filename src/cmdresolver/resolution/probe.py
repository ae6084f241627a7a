# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execution probes confirming that a command actually runs."""

from __future__ import annotations

import logging
import subprocess  # nosec B404
from typing import Final

from ..interfaces import ProcessRunner

LOGGER = logging.getLogger(__name__)

DEFAULT_PROBE_ARGUMENT: Final[str] = "--version"
DEFAULT_PROBE_TIMEOUT: Final[float] = 5.0


class AvailabilityProbe:
    """Spawn a command with a lightweight flag and report whether it succeeded."""

    def __init__(
        self,
        runner: ProcessRunner,
        *,
        timeout: float = DEFAULT_PROBE_TIMEOUT,
        argument: str = DEFAULT_PROBE_ARGUMENT,
    ) -> None:
        self._runner = runner
        self._timeout = timeout
        self._argument = argument

    def probe(self, command: str, timeout: float | None = None) -> bool:
        """Return ``True`` when ``command`` starts and exits 0 within the timeout.

        Spawn failures, non-zero exits, timeouts and any error raised by the
        runner all yield ``False``; the runner kills a child that outlives the
        timeout.

        Args:
            command: Bare command name or absolute executable path.
            timeout: Optional override of the configured timeout in seconds.

        Returns:
            bool: ``True`` when the probe succeeded.
        """

        limit = self._timeout if timeout is None else timeout
        try:
            returncode = self._runner.spawn([command, self._argument], timeout=limit)
        except (OSError, ValueError, subprocess.SubprocessError) as exc:
            LOGGER.debug("probe of '%s' failed to start: %s", command, exc)
            return False
        except Exception:  # noqa: BLE001
            LOGGER.warning("probe of '%s' raised unexpectedly", command, exc_info=True)
            return False
        if returncode != 0:
            LOGGER.debug("probe of '%s' exited with status %s", command, returncode)
            return False
        return True

    def probe_path(self, path: str, timeout: float | None = None) -> bool:
        """Probe the executable stored at ``path`` rather than a bare command name."""

        return self.probe(path, timeout=timeout)


__all__ = ["AvailabilityProbe", "DEFAULT_PROBE_ARGUMENT", "DEFAULT_PROBE_TIMEOUT"]
