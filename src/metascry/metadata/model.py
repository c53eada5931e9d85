"""Merged metadata record types."""

from __future__ import annotations

from typing import Any

from metascry.paths.deep import PathAccessible

FILE_KEY = "file"
CACHE_KEY = "cache"
RESERVED_KEYS = frozenset({FILE_KEY, CACHE_KEY})


class Metadata(dict, PathAccessible):
    """One document's frontmatter merged with its ``file`` and ``cache`` data.

    A plain dict with deep-path helpers::

        meta.get_prop("file.sections")
        meta.set_prop("cache.views", Factory(lambda n: (n or 0) + 1))
    """

    @property
    def file(self) -> dict[str, Any]:
        """Structural data (path, timestamps, sections)."""
        return self[FILE_KEY]

    @property
    def cache(self) -> dict[str, Any]:
        """The document's in-process cache mapping."""
        return self[CACHE_KEY]

    @property
    def frontmatter(self) -> dict[str, Any]:
        """The user keys, without the reserved ones."""
        return {k: v for k, v in self.items() if k not in RESERVED_KEYS}
