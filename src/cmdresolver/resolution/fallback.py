# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Search ``PATH`` entries and well-known install locations for a command.

The search runs only after the direct probe and the platform lookup failed. It
never raises: a missing variable, an unreadable directory or a candidate that
fails its probe simply moves the search on to the next candidate.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Final

from packaging.version import InvalidVersion, Version

from ..interfaces import FileSystem
from ..platform import HostPlatform
from .locations import toolchain_for
from .models import FallbackCandidate
from .probe import AvailabilityProbe

LOGGER = logging.getLogger(__name__)

_ENV_REFERENCE: Final[re.Pattern[str]] = re.compile(r"\$\{(\w+)\}")
GLOB_TOKEN: Final[str] = "*"


def expand_environment(template: str, environ: Mapping[str, str]) -> str | None:
    """Substitute ``${NAME}`` references in ``template`` from ``environ``.

    Args:
        template: Path template possibly referencing environment variables.
        environ: Environment mapping used for substitution.

    Returns:
        str | None: Expanded path, or ``None`` when a referenced variable is unset or empty.
    """

    missing = [name for name in _ENV_REFERENCE.findall(template) if not environ.get(name)]
    if missing:
        return None
    return _ENV_REFERENCE.sub(lambda match: environ[match.group(1)], template)


def _parse_version(entry: str) -> Version | None:
    candidate = entry[1:] if entry[:1] in {"v", "V"} else entry
    try:
        return Version(candidate)
    except InvalidVersion:
        return None


def order_version_entries(entries: Iterable[str]) -> list[str]:
    """Return directory entries ordered best-first for glob expansion.

    Entries that parse as versions (ignoring a leading ``v``) come first, highest
    version first; remaining entries such as ``current`` follow in descending
    lexicographic order. Ties between equal versions (``v20.1.0`` and
    ``20.1.0``) are broken lexicographically, last first.

    Args:
        entries: Names listed in the directory holding the glob segment.

    Returns:
        list[str]: Entries in the order their expansions are tried.
    """

    versioned: list[tuple[Version, str]] = []
    others: list[str] = []
    for entry in entries:
        version = _parse_version(entry)
        if version is None:
            others.append(entry)
        else:
            versioned.append((version, entry))
    versioned.sort(reverse=True)
    return [entry for _, entry in versioned] + sorted(others, reverse=True)


class FallbackPathSearch:
    """Find a runnable copy of a command outside the shell's own lookup."""

    def __init__(
        self,
        probe: AvailabilityProbe,
        filesystem: FileSystem,
        platform: HostPlatform,
        *,
        environ: Mapping[str, str],
        extra_templates: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        self._probe = probe
        self._fs = filesystem
        self._platform = platform
        self._environ = environ
        self._extra_templates = {key: tuple(value) for key, value in (extra_templates or {}).items()}

    def candidates(self, command: str) -> list[FallbackCandidate]:
        """Return the ordered candidate paths for ``command`` on this platform."""

        names = self._platform.executable_names(command)
        paths: list[str] = []
        for directory in self._platform.split_path_env(self._environ.get("PATH")):
            paths.extend(self._platform.join(directory, name) for name in names)

        toolchain = toolchain_for(command)
        if toolchain is not None:
            for template in toolchain.directories_for(self._platform.name):
                directory = expand_environment(template, self._environ)
                if directory is None:
                    continue
                paths.extend(self._platform.join(directory, name) for name in names)

        for template in self._extra_templates.get(command, ()):
            expanded = expand_environment(template, self._environ)
            if expanded is not None:
                paths.append(expanded)

        seen: set[str] = set()
        ordered: list[FallbackCandidate] = []
        for path in paths:
            if path in seen:
                continue
            seen.add(path)
            ordered.append(FallbackCandidate.from_path(path))
        return ordered

    def expand(self, candidate: FallbackCandidate) -> list[str]:
        """Return the concrete paths ``candidate`` stands for, best match first.

        A glob candidate lists the directory holding its ``*`` segment and keeps
        the entries whose expanded path exists, ordered by
        :func:`order_version_entries`. Listing failures yield no paths.
        """

        template = candidate.path_template
        if not candidate.requires_glob_expansion:
            return [template]
        if template.count(GLOB_TOKEN) != 1:
            LOGGER.debug("skipping candidate with unsupported glob: %s", template)
            return []

        separators = ("/", "\\") if self._platform.is_windows else ("/",)
        prefix, suffix = template.split(GLOB_TOKEN)
        if not prefix.endswith(separators) or (suffix and not suffix.startswith(separators)):
            LOGGER.debug("skipping candidate whose glob is not a whole segment: %s", template)
            return []

        parent = prefix.rstrip("".join(separators)) or prefix
        tail = suffix.lstrip("".join(separators))
        try:
            entries = self._fs.listdir(parent)
        except OSError as exc:
            LOGGER.debug("cannot list %s: %s", parent, exc)
            return []

        expanded: list[str] = []
        for entry in order_version_entries(entries):
            path = self._platform.join(parent, entry, tail) if tail else self._platform.join(parent, entry)
            if self._fs.exists(path):
                expanded.append(path)
        return expanded

    def search(self, command: str) -> str | None:
        """Return the first candidate for ``command`` that exists and passes a probe."""

        for candidate in self.candidates(command):
            for path in self.expand(candidate):
                LOGGER.debug("checking fallback candidate %s", path)
                if not self._fs.exists(path):
                    continue
                if self._probe.probe_path(path):
                    LOGGER.info("found '%s' at fallback path %s", command, path)
                    return path
        return None


__all__ = [
    "FallbackPathSearch",
    "expand_environment",
    "order_version_entries",
]
