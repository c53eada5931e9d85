"""Accessor for the active document's metadata."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any, Optional

from metascry.core.types import UpdateOptions
from metascry.paths.resolver import PathSpec

if TYPE_CHECKING:
    from metascry.metadata.aggregator import ClearSpec
    from metascry.metadata.model import Metadata
    from metascry.metadata.sections import Sections
    from metascry.services.scrier import Scrier
    from metascry.sources.protocols import DocumentHandle


class CurrentDocument:
    """Shortcut properties resolved against the active document on access.

    Raises ``NoCurrentDocumentError`` from any property when nothing is active.
    """

    def __init__(self, scrier: "Scrier"):
        self._scrier = scrier

    @property
    def handle(self) -> "DocumentHandle":
        return self._scrier.resolver.resolve_one(None)

    @property
    def path_ex(self) -> str:
        """Full identifier, extension included."""
        return self.handle.path

    @property
    def path(self) -> str:
        """Identifier without its extension."""
        return str(PurePosixPath(self.path_ex).with_suffix(""))

    @property
    def data(self) -> "Metadata":
        return self._scrier.get()

    @property
    def matter(self) -> dict[str, Any]:
        return self._scrier.frontmatter()

    @property
    def cache(self) -> dict[str, Any]:
        return self._scrier.cache()

    @property
    def sections(self) -> "Sections":
        return self._scrier.sections()

    async def patch(
        self,
        data: Any,
        property_name: PathSpec = None,
        options: Optional[UpdateOptions] = None,
    ) -> "Metadata":
        return await self._scrier.patch(self.handle, data, property_name, options)

    async def set(self, data: Any, options: Optional[UpdateOptions] = None) -> "Metadata":
        return await self._scrier.set(self.handle, data, options)

    async def clear(
        self,
        properties: "ClearSpec" = None,
        options: Optional[UpdateOptions] = None,
    ) -> "Metadata":
        return await self._scrier.clear(self.handle, properties, options)
