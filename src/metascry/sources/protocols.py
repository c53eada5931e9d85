"""Protocol definitions for the collaborators metascry consumes.

The aggregation core never touches files or an editor directly. It reads
and writes through these interfaces, so any backend (the bundled
filesystem vault, an in-memory fake, a host application's index) can be
plugged in.

Example:
    class MyIndex:
        def get(self, handle: DocumentHandle) -> Mapping[str, Any]:
            return self._frontmatter.get(handle.path, {})

    aggregator = MetadataAggregator(frontmatter=MyIndex(), ...)
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from metascry.core.types import StructuralData


@runtime_checkable
class DocumentHandle(Protocol):
    """A concrete reference to a document."""

    @property
    def path(self) -> str:
        """Document identifier."""
        ...


@runtime_checkable
class CurrentDocumentProvider(Protocol):
    """Reports the active document, if any."""

    def get_active(self) -> Optional[DocumentHandle]:
        ...


@runtime_checkable
class DocumentLookup(Protocol):
    """Resolves identifiers to handles."""

    def by_identifier(self, identifier: str) -> Optional[DocumentHandle]:
        """Return the handle for ``identifier``, or None if it does not exist."""
        ...


@runtime_checkable
class FrontmatterProvider(Protocol):
    """Supplies a document's frontmatter mapping."""

    def get(self, handle: DocumentHandle) -> Optional[Mapping[str, Any]]:
        """Return the frontmatter, or None/empty if the document has none."""
        ...


@runtime_checkable
class StructuralProvider(Protocol):
    """Supplies identifiers, timestamps and raw headings for a document."""

    def get(self, handle: DocumentHandle) -> StructuralData:
        ...


@runtime_checkable
class ContentLoader(Protocol):
    """Loads the text under a heading on demand."""

    async def load_section(self, handle: DocumentHandle, heading: str) -> str:
        ...


@runtime_checkable
class MutationEditor(Protocol):
    """Performs frontmatter rewrites on the underlying document."""

    async def patch(self, handle: DocumentHandle, data: Mapping[str, Any]) -> None:
        """Insert or replace the given top-level keys."""
        ...

    async def set(self, handle: DocumentHandle, data: Mapping[str, Any]) -> None:
        """Replace the whole frontmatter."""
        ...

    async def clear(self, handle: DocumentHandle, keys: list[str]) -> None:
        """Remove the given top-level keys."""
        ...
