# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry of adapter packages shipped alongside the host application."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Final

from ..interfaces import FileSystem
from ..platform import HostPlatform
from .models import BundledServerEntry

LOGGER = logging.getLogger(__name__)

PACKAGE_RUNNER: Final[str] = "npx"
PACKAGE_DIRECTORY: Final[str] = "node_modules"
ENTRY_POINT_SUFFIXES: Final[tuple[tuple[str, ...], ...]] = (
    ("dist", "index.js"),
    ("index.js",),
    ("lib", "index.js"),
    ("src", "index.js"),
)
DEFAULT_BUNDLED_PACKAGES: Final[tuple[str, ...]] = (
    "@modelcontextprotocol/server-filesystem",
    "@modelcontextprotocol/server-github",
)
RUNNER_FLAGS: Final[frozenset[str]] = frozenset({"-y", "--yes"})


def split_package_spec(spec: str) -> tuple[str, str | None]:
    """Split a package specifier into name and version components."""

    if spec.startswith(("git+", "file:", "http")):
        return spec, None
    if spec.startswith("@"):
        if spec.count("@") >= 2:
            name, version = spec.rsplit("@", 1)
            return name, version
        return spec, None
    if "@" in spec:
        name, version = spec.rsplit("@", 1)
        return name, version
    return spec, None


def package_identity(args: Sequence[str]) -> tuple[str, int] | None:
    """Return the package named by a package-runner invocation and its index.

    Leading runner flags such as ``-y`` are skipped and a trailing ``@version``
    is dropped, so ``["-y", "@scope/pkg@1.2.0", "/data"]`` yields
    ``("@scope/pkg", 1)``.

    Args:
        args: Arguments passed to the package runner.

    Returns:
        tuple[str, int] | None: Normalised package name and its position in
        ``args``, or ``None`` when no package is named.
    """

    for index, arg in enumerate(args):
        if arg in RUNNER_FLAGS:
            continue
        if arg.startswith("-"):
            return None
        name, _ = split_package_spec(arg)
        return name, index
    return None


def registry_key(command: str, package_name: str) -> str:
    return f"{command} {package_name}"


@dataclass(frozen=True, slots=True)
class BundleSearchRoots:
    """Directories that may contain a ``node_modules`` tree with bundled packages.

    Attributes:
        working_dir: Process working directory.
        extra_roots: Additional application directories from configuration.
        resources_path: Resource directory of a packaged distribution, when frozen.
    """

    working_dir: Path
    extra_roots: tuple[Path, ...] = ()
    resources_path: Path | None = None

    def package_directories(self, package_name: str, platform: HostPlatform) -> list[str]:
        """Return candidate install directories for ``package_name`` in search order."""

        package_parts = package_name.split("/")
        bases = [self.working_dir, *self.extra_roots]
        directories = [platform.join(str(base), PACKAGE_DIRECTORY, *package_parts) for base in bases]
        if self.resources_path is not None:
            resources = str(self.resources_path)
            directories.append(platform.join(resources, "app", PACKAGE_DIRECTORY, *package_parts))
            directories.append(platform.join(resources, PACKAGE_DIRECTORY, *package_parts))
        return directories


class BundledRegistry:
    """Discover shipped entry points once and answer lookups afterwards."""

    def __init__(
        self,
        filesystem: FileSystem,
        platform: HostPlatform,
        roots: BundleSearchRoots,
        *,
        packages: Iterable[str] = DEFAULT_BUNDLED_PACKAGES,
    ) -> None:
        self._fs = filesystem
        self._platform = platform
        self._roots = roots
        self._packages = tuple(dict.fromkeys(packages))
        self._lock = Lock()
        self._entries: dict[str, BundledServerEntry] = self._discover()

    def reinitialize(self) -> None:
        """Repeat discovery, replacing every recorded entry."""

        entries = self._discover()
        with self._lock:
            self._entries = entries

    def lookup(self, key: str) -> BundledServerEntry | None:
        with self._lock:
            return self._entries.get(key)

    def all(self) -> dict[str, BundledServerEntry]:
        with self._lock:
            return dict(self._entries)

    def _discover(self) -> dict[str, BundledServerEntry]:
        entries: dict[str, BundledServerEntry] = {}
        for package_name in self._packages:
            bundled_path = self.find_entry_point(package_name)
            entries[registry_key(PACKAGE_RUNNER, package_name)] = BundledServerEntry(
                command=PACKAGE_RUNNER,
                args=(package_name,),
                package_name=package_name,
                bundled_path=bundled_path,
            )
        return entries

    def find_entry_point(self, package_name: str) -> str | None:
        """Return the first shipped entry-point file for ``package_name``, if any."""

        LOGGER.debug("searching for bundled package %s", package_name)
        for directory in self._roots.package_directories(package_name, self._platform):
            for suffix in ENTRY_POINT_SUFFIXES:
                entry_point = self._platform.join(directory, *suffix)
                LOGGER.debug("checking entry point %s", entry_point)
                if self._fs.exists(entry_point):
                    LOGGER.info("found bundled server %s at %s", package_name, entry_point)
                    return entry_point
        return None


__all__ = [
    "BundleSearchRoots",
    "BundledRegistry",
    "DEFAULT_BUNDLED_PACKAGES",
    "ENTRY_POINT_SUFFIXES",
    "PACKAGE_RUNNER",
    "package_identity",
    "registry_key",
    "split_package_spec",
]
