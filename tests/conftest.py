# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures and fake operating-system facilities."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from cmdresolver.config import ResolverConfig
from cmdresolver.interfaces import FileSystem, ProcessRunner
from cmdresolver.platform import HostPlatform, platform_for
from cmdresolver.resolver import Resolver


@dataclass
class FakeRunner(ProcessRunner):
    """Process runner answering probes and lookups from in-memory tables.

    Attributes:
        succeeding: Executables whose probe exits 0; anything else is "not found".
        exit_codes: Explicit exit statuses for specific executables.
        lookups: ``which``/``where`` output keyed by the looked-up command.
        spawn_error: Exception raised by every spawn when set.
        spawn_errors: Exceptions raised when spawning specific executables.
    """

    succeeding: set[str] = field(default_factory=set)
    exit_codes: dict[str, int] = field(default_factory=dict)
    lookups: dict[str, str] = field(default_factory=dict)
    spawn_error: Exception | None = None
    spawn_errors: dict[str, Exception] = field(default_factory=dict)
    spawned: list[list[str]] = field(default_factory=list)
    ran: list[list[str]] = field(default_factory=list)
    timeouts: list[float | None] = field(default_factory=list)

    def spawn(self, args: Sequence[str], *, timeout: float | None = None) -> int:
        self.spawned.append(list(args))
        self.timeouts.append(timeout)
        if self.spawn_error is not None:
            raise self.spawn_error
        executable = args[0]
        if executable in self.spawn_errors:
            raise self.spawn_errors[executable]
        if executable in self.exit_codes:
            return self.exit_codes[executable]
        if executable in self.succeeding:
            return 0
        raise FileNotFoundError(f"No such file or directory: '{executable}'")

    def run(self, args: Sequence[str], *, timeout: float | None = None) -> subprocess.CompletedProcess[str]:
        self.ran.append(list(args))
        self.timeouts.append(timeout)
        output = self.lookups.get(args[-1])
        if output is None:
            return subprocess.CompletedProcess(args=list(args), returncode=1, stdout="", stderr="not found")
        return subprocess.CompletedProcess(args=list(args), returncode=0, stdout=output, stderr="")

    def spawned_executables(self) -> list[str]:
        return [call[0] for call in self.spawned]


@dataclass
class FakeFileSystem(FileSystem):
    """Filesystem made of a set of files and a table of directory listings."""

    files: set[str] = field(default_factory=set)
    directories: dict[str, list[str] | OSError] = field(default_factory=dict)
    checked: list[str] = field(default_factory=list)

    def exists(self, path: str) -> bool:
        self.checked.append(path)
        return path in self.files or path in self.directories

    def listdir(self, path: str) -> list[str]:
        listing = self.directories.get(path)
        if listing is None:
            raise FileNotFoundError(path)
        if isinstance(listing, OSError):
            raise listing
        return list(listing)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def linux() -> HostPlatform:
    return platform_for("linux")


@pytest.fixture
def windows() -> HostPlatform:
    return platform_for("win32")


ResolverFactory = Callable[..., Resolver]


@pytest.fixture
def make_resolver(fake_runner: FakeRunner, fake_fs: FakeFileSystem, linux: HostPlatform) -> ResolverFactory:
    """Return a factory building resolvers wired to the shared fakes."""

    def _build(
        *,
        config: ResolverConfig | None = None,
        environ: Mapping[str, str] | None = None,
        platform: HostPlatform | None = None,
        working_dir: Path = Path("/app"),
    ) -> Resolver:
        return Resolver(
            config=config or ResolverConfig(),
            runner=fake_runner,
            filesystem=fake_fs,
            platform=platform or linux,
            environ=dict(environ) if environ is not None else {"PATH": "", "HOME": "/home/tester"},
            working_dir=working_dir,
        )

    return _build
