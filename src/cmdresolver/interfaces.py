# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Contracts for the operating-system facilities consumed by the resolver."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from subprocess import CompletedProcess
from typing import Protocol, runtime_checkable


@runtime_checkable
class ProcessRunner(Protocol):
    """Start external processes with bounded run time.

    Implementations must never leave a child running past its timeout: a process
    that outlives ``timeout`` is killed and reaped before the call returns.
    """

    @abstractmethod
    def spawn(self, args: Sequence[str], *, timeout: float | None = None) -> int:
        """Run ``args`` with all standard streams discarded and return the exit status.

        Args:
            args: Executable followed by its arguments.
            timeout: Seconds to wait before the child is killed.

        Returns:
            int: Exit status of the child, ``124`` when the timeout elapsed.

        Raises:
            OSError: If the executable cannot be started.
        """
        raise NotImplementedError

    @abstractmethod
    def run(self, args: Sequence[str], *, timeout: float | None = None) -> CompletedProcess[str]:
        """Run ``args`` capturing text output.

        Args:
            args: Executable followed by its arguments.
            timeout: Seconds to wait before the child is killed.

        Returns:
            CompletedProcess[str]: Completed process with captured ``stdout``/``stderr``.

        Raises:
            OSError: If the executable cannot be started.
        """
        raise NotImplementedError


@runtime_checkable
class FileSystem(Protocol):
    """Read-only filesystem queries used by candidate verification."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return ``True`` when ``path`` exists; never raises."""
        raise NotImplementedError

    @abstractmethod
    def listdir(self, path: str) -> list[str]:
        """Return the entry names of directory ``path``.

        Raises:
            OSError: If the directory is missing or unreadable.
        """
        raise NotImplementedError


__all__ = ["FileSystem", "ProcessRunner"]
