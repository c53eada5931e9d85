"""Session container class.

This module provides the ScrySession class holding wired collaborators
and the single cache store of a running session.

Use create_session() or open_vault() from metascry.app to create a
properly configured instance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from ..core.config import ScryConfig
    from ..metadata.aggregator import MetadataAggregator
    from ..metadata.cache import CacheStore
    from ..services.scrier import Scrier
    from ..sources.resolver import SourceResolver


class ScrySession:
    """Session container with wired services and lifecycle management.

    The cache store is created with the session and cleared when it
    closes, so cached annotations never outlive the session.

    Attributes:
        scrier: Public metadata API.
        aggregator: Metadata aggregator.
        resolver: Source resolver.
        vault: The filesystem Vault, for sessions made by open_vault().

    Example:
        with open_vault("~/notes") as session:
            meta = session.scrier.get("Ideas/Garden.md")

        async with open_vault("~/notes") as session:
            await session.scrier.patch("Ideas/Garden.md", "done", "status")
    """

    def __init__(
        self,
        config: "ScryConfig",
        cache: "CacheStore",
        resolver: "SourceResolver",
        aggregator: "MetadataAggregator",
        scrier: "Scrier",
    ):
        """Initialize ScrySession with wired services.

        This constructor is for internal use. Use create_session() instead.
        """
        self._config = config
        self._cache = cache
        self._closed = False

        # Public service accessors
        self.resolver = resolver
        self.aggregator = aggregator
        self.scrier = scrier
        # Set by open_vault() for filesystem-backed sessions
        self.vault = None

    @property
    def config(self) -> "ScryConfig":
        """Get session configuration."""
        return self._config

    @property
    def cache(self) -> "CacheStore":
        """Get the session's cache store."""
        return self._cache

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """End the session, dropping every cached annotation."""
        if self._closed:
            return
        self._cache.clear()
        self._closed = True
        logger.info("metascry session closed")

    def __enter__(self) -> "ScrySession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def __aenter__(self) -> "ScrySession":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
