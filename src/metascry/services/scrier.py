"""Public read/write API over document metadata.

Every method takes a *source*: None for the active document, an
identifier, a handle, a metadata record, or a (nested) list of those.
Single sources return a bare result; list sources return a dict keyed by
document identifier.

Example:
    scry = session.scrier
    scry.get("notes/Idea.md", "status")              # "draft"
    scry.get(["a.md", "b.md"])                       # {"a.md": {...}, "b.md": {...}}
    await scry.patch("a.md", Factory(lambda n: (n or 0) + 1), "views")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from metascry.core.config import ScryConfig
from metascry.core.types import UpdateOptions
from metascry.paths.deep import deep_get
from metascry.paths.resolver import PathSpec
from metascry.services.dispatch import ScryResult, dispatch, dispatch_async
from metascry.sources.resolver import Source, SourceResolver

if TYPE_CHECKING:
    from metascry.metadata.aggregator import ClearSpec, MetadataAggregator
    from metascry.services.current import CurrentDocument


class Scrier:
    """Metadata access for one session."""

    def __init__(
        self,
        resolver: SourceResolver,
        aggregator: "MetadataAggregator",
        config: Optional[ScryConfig] = None,
    ):
        """Initialize Scrier.

        Args:
            resolver: Source resolver.
            aggregator: Metadata aggregator.
            config: Library configuration.
        """
        self._resolver = resolver
        self._aggregator = aggregator
        self._config = config or ScryConfig()

    @property
    def resolver(self) -> SourceResolver:
        return self._resolver

    @property
    def current(self) -> "CurrentDocument":
        """Accessor bound to the active document."""
        from metascry.services.current import CurrentDocument

        return CurrentDocument(self)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get(self, source: Source = None, path: PathSpec = None) -> ScryResult:
        """Get merged metadata, or the value at ``path`` within it."""

        def operation(handle):
            metadata = self._aggregator.aggregate(handle)
            if path is None:
                return metadata
            return deep_get(metadata, path, delimiter=self._config.path_delimiter)

        return dispatch(self._resolver, source, operation)

    def frontmatter(self, source: Source = None) -> ScryResult:
        """Get the frontmatter alone (a private copy)."""
        return dispatch(self._resolver, source, self._aggregator.frontmatter)

    def file(self, source: Source = None) -> ScryResult:
        """Get the structural ``file`` record."""
        return dispatch(self._resolver, source, self._aggregator.file_data)

    def sections(self, source: Source = None) -> ScryResult:
        """Get the lazily loadable heading sections."""
        return dispatch(self._resolver, source, self._aggregator.sections)

    def cache(self, source: Source = None, path: PathSpec = None) -> ScryResult:
        """Get the session cache dict, or the value at ``path`` within it."""

        def operation(handle):
            entry = self._aggregator.cache(handle)
            if path is None:
                return entry
            return deep_get(entry, path, delimiter=self._config.path_delimiter)

        return dispatch(self._resolver, source, operation)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def patch(
        self,
        source: Source,
        data: Any,
        property_name: PathSpec = None,
        options: Optional[UpdateOptions] = None,
    ) -> ScryResult:
        """Merge ``data`` into the frontmatter (at ``property_name`` if given)."""
        return await dispatch_async(
            self._resolver,
            source,
            lambda handle: self._aggregator.patch(handle, data, property_name, options),
        )

    async def set(
        self,
        source: Source,
        data: Any,
        options: Optional[UpdateOptions] = None,
    ) -> ScryResult:
        """Replace the whole frontmatter with ``data``."""
        return await dispatch_async(
            self._resolver,
            source,
            lambda handle: self._aggregator.set(handle, data, options),
        )

    async def clear(
        self,
        source: Source = None,
        properties: "ClearSpec" = None,
        options: Optional[UpdateOptions] = None,
    ) -> ScryResult:
        """Remove frontmatter keys (all of them when ``properties`` is None)."""
        return await dispatch_async(
            self._resolver,
            source,
            lambda handle: self._aggregator.clear(handle, properties, options),
        )
