"""In-process, per-document scratch cache."""

from __future__ import annotations

from typing import Any, Iterator

from loguru import logger


class CacheStore:
    """Mapping from document identifier to a mutable scratch dict.

    One store lives for one session. Entries are created empty on first
    access and the same dict is returned afterwards, so callers can
    annotate a document across calls. Nothing is ever written back to the
    document.
    """

    def __init__(self) -> None:
        self._entries: dict[str, dict[str, Any]] = {}

    def get(self, identifier: str) -> dict[str, Any]:
        """Get (creating if needed) the cache dict for a document."""
        entry = self._entries.get(identifier)
        if entry is None:
            entry = self._entries[identifier] = {}
            logger.debug(f"Created cache entry: {identifier!r}")
        return entry

    def drop(self, identifier: str) -> bool:
        """Forget one document's cache.

        Returns:
            True if an entry was removed.
        """
        return self._entries.pop(identifier, None) is not None

    def clear(self) -> None:
        """Forget every entry."""
        if self._entries:
            logger.debug(f"Clearing {len(self._entries)} cache entries")
        self._entries.clear()

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
