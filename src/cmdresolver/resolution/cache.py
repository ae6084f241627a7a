# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-memory storage for completed command resolutions."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Sequence
from threading import RLock

from .models import CommandResolution


def cache_key(command: str, args: Sequence[str]) -> str:
    """Return the canonical cache key for ``command`` invoked with ``args``."""

    return f"{command} {' '.join(args)}"


class ResolutionCache:
    """Map cache keys to finished resolutions.

    Entries are only ever written whole, so readers never observe a resolution
    that is still being computed. The cache is unbounded unless ``max_entries``
    is given, in which case the least recently used entry is evicted.
    """

    def __init__(self, *, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be a positive integer or None")
        self._store: OrderedDict[str, CommandResolution] = OrderedDict()
        self._max_entries = max_entries
        self._lock = RLock()

    def get(self, key: str) -> CommandResolution | None:
        """Return the resolution stored for ``key`` when present."""

        with self._lock:
            value = self._store.get(key)
            if value is not None and self._max_entries is not None:
                self._store.move_to_end(key)
            return value

    def put(self, key: str, value: CommandResolution) -> None:
        """Store ``value`` for ``key``, replacing any previous entry."""

        with self._lock:
            self._store[key] = value
            self._store.move_to_end(key)
            if self._max_entries is not None:
                while len(self._store) > self._max_entries:
                    self._store.popitem(last=False)

    def clear(self) -> None:
        """Remove every stored resolution."""

        with self._lock:
            self._store.clear()

    def entries(self) -> dict[str, CommandResolution]:
        """Return a snapshot copy of the stored resolutions."""

        with self._lock:
            return dict(self._store)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store


__all__ = ["ResolutionCache", "cache_key"]
