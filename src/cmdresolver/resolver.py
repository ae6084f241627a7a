# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Orchestrate probing, lookup, bundled servers and fallback search."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from .config import ResolverConfig, load_config
from .interfaces import FileSystem, ProcessRunner
from .platform import HostPlatform, detect_platform
from .resolution.bundled import BundledRegistry, BundleSearchRoots, package_identity, registry_key
from .resolution.cache import ResolutionCache, cache_key
from .resolution.fallback import FallbackPathSearch
from .resolution.instructions import get_installation_instructions
from .resolution.lookup import PathLookup
from .resolution.models import (
    BundledServerEntry,
    CommandResolution,
    FallbackUsed,
    InstallationInstructions,
)
from .resolution.probe import AvailabilityProbe
from .system import LocalFileSystem, SubprocessRunner

LOGGER = logging.getLogger(__name__)


class Resolver:
    """Resolve logical commands to something the host can actually launch.

    A resolver owns its resolution cache and bundled-server registry; the
    registry is discovered once, when the resolver is constructed. Every
    collaborator touching the operating system can be injected for tests.

    Concurrent misses on the same key are not coalesced: each caller probes on
    its own and the last finished resolution is the one left in the cache.
    """

    def __init__(
        self,
        *,
        config: ResolverConfig | None = None,
        runner: ProcessRunner | None = None,
        filesystem: FileSystem | None = None,
        platform: HostPlatform | None = None,
        environ: Mapping[str, str] | None = None,
        working_dir: Path | None = None,
    ) -> None:
        self._config = config or ResolverConfig()
        self._runner = runner or SubprocessRunner()
        self._fs = filesystem or LocalFileSystem()
        self._platform = platform or detect_platform()
        self._environ = environ if environ is not None else os.environ

        self._probe = AvailabilityProbe(
            self._runner,
            timeout=self._config.probe_timeout,
            argument=self._config.probe_argument,
        )
        self._lookup = PathLookup(self._runner, self._platform, timeout=self._config.lookup_timeout)
        self._fallback = FallbackPathSearch(
            self._probe,
            self._fs,
            self._platform,
            environ=self._environ,
            extra_templates=self._config.extra_search_paths,
        )
        self._registry = BundledRegistry(
            self._fs,
            self._platform,
            BundleSearchRoots(
                working_dir=working_dir or Path.cwd(),
                extra_roots=tuple(self._config.bundle_roots),
                resources_path=self._config.effective_resources_path(),
            ),
            packages=self._config.all_bundled_packages(),
        )
        self._cache = ResolutionCache(max_entries=self._config.cache_max_entries)

    def resolve_command(self, command: str, args: Sequence[str] = ()) -> CommandResolution:
        """Return how ``command`` invoked with ``args`` can be executed.

        Cached resolutions are returned without starting any process. On a miss
        the command is probed directly, then matched against bundled servers,
        then searched for in fallback locations. The finished result, success
        or failure, is cached before it is returned.

        Args:
            command: Logical command name such as ``"npx"``.
            args: Arguments the command will be launched with.

        Returns:
            CommandResolution: Resolution for the pair; ``available`` is
            ``False`` when every strategy failed. This method never raises.
        """

        arguments = tuple(args)
        key = cache_key(command, arguments)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            resolution = self._resolve_uncached(command, arguments)
        except Exception:  # noqa: BLE001
            LOGGER.exception("error resolving command '%s'", command)
            resolution = CommandResolution.unavailable(command, arguments)

        self._cache.put(key, resolution)
        return resolution

    async def resolve_command_async(self, command: str, args: Sequence[str] = ()) -> CommandResolution:
        """Resolve on a worker thread so an event loop is never blocked by probes."""

        return await asyncio.to_thread(self.resolve_command, command, tuple(args))

    def _resolve_uncached(self, command: str, args: tuple[str, ...]) -> CommandResolution:
        if self._probe.probe(command):
            LOGGER.info("command '%s' found in PATH", command)
            return CommandResolution(
                command=command,
                args=args,
                available=True,
                resolved_path=self._lookup.locate(command),
            )

        bundled = self._resolve_bundled(command, args)
        if bundled is not None:
            return bundled

        fallback_path = self._fallback.search(command)
        if fallback_path is not None:
            return CommandResolution(
                command=command,
                args=args,
                available=True,
                resolved_path=fallback_path,
                fallback_used=FallbackUsed.SYSTEM_PATH,
            )

        LOGGER.warning("command '%s' not found in PATH or fallback locations", command)
        return CommandResolution.unavailable(command, args)

    def _resolve_bundled(self, command: str, args: tuple[str, ...]) -> CommandResolution | None:
        identity = package_identity(args)
        if identity is None:
            return None
        package_name, index = identity
        entry = self._registry.lookup(registry_key(command, package_name))
        if entry is None or entry.bundled_path is None:
            return None

        runtime_path = self.find_runtime_executable()
        if runtime_path is None:
            LOGGER.warning(
                "bundled server %s is available but '%s' could not be found",
                entry.package_name,
                self._config.runtime_command,
            )
            return None

        LOGGER.info("using bundled server %s", entry.package_name)
        return CommandResolution(
            command=runtime_path,
            args=(entry.bundled_path, *args[index + 1 :]),
            available=True,
            resolved_path=runtime_path,
            fallback_used=FallbackUsed.BUNDLED_SERVER,
        )

    def find_runtime_executable(self) -> str | None:
        """Return the interpreter that runs bundled entry points, if one is installed."""

        runtime = self._config.runtime_command
        return self._lookup.locate(runtime) or self._fallback.search(runtime)

    def get_bundled_servers(self) -> dict[str, BundledServerEntry]:
        return self._registry.all()

    def get_installation_instructions(self, command: str) -> InstallationInstructions:
        return get_installation_instructions(command)

    def clear_cache(self) -> None:
        """Forget every cached resolution; later calls probe again."""

        self._cache.clear()
        LOGGER.info("command cache cleared")

    def get_cached_resolutions(self) -> dict[str, CommandResolution]:
        return self._cache.entries()


def build_resolver(root: Path | None = None, *, env: Mapping[str, str] | None = None) -> Resolver:
    """Return a resolver configured from the files and environment applying to ``root``.

    Raises:
        ConfigError: If the configuration is invalid.
    """

    working_dir = root or Path.cwd()
    config = load_config(working_dir, env=env)
    return Resolver(config=config, environ=env, working_dir=working_dir)


__all__ = ["Resolver", "build_resolver"]
