"""Resolution of source specifications into document handles."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator, Union

from loguru import logger

from metascry.core.exceptions import (
    AmbiguousSourceError,
    DocumentNotFoundError,
    NoCurrentDocumentError,
)
from metascry.paths.deep import deep_get
from metascry.sources.protocols import (
    CurrentDocumentProvider,
    DocumentHandle,
    DocumentLookup,
)

Source = Union[None, str, DocumentHandle, Mapping[str, Any], list, tuple]


def is_multiple(source: Source) -> bool:
    """Whether a source is sequence-shaped (and so always yields a map)."""
    return isinstance(source, (list, tuple))


def identifier_of(source: Any) -> str | None:
    """Extract the document identifier from a single (non-sequence) source.

    Accepts an identifier string, a handle exposing ``path``, or a metadata
    mapping carrying ``file.path`` (or a top-level ``path``).

    Returns:
        The identifier, or None if the source carries none.
    """
    if isinstance(source, str):
        return source
    if isinstance(source, Mapping):
        return deep_get(source, ("file", "path")) or source.get("path")
    path = getattr(source, "path", None)
    return path if isinstance(path, str) else None


class SourceResolver:
    """Turns source specifications into concrete document handles.

    Example:
        resolver = SourceResolver(lookup=vault, current=vault)
        resolver.resolve_all(["a.md", ["b.md", "c.md"]])  # 3 handles
        resolver.resolve_one(None)  # the active document
    """

    def __init__(self, lookup: DocumentLookup, current: CurrentDocumentProvider):
        """Initialize SourceResolver.

        Args:
            lookup: Collaborator resolving identifiers to handles.
            current: Collaborator reporting the active document.
        """
        self._lookup = lookup
        self._current = current

    def resolve_all(self, source: Source) -> list[DocumentHandle]:
        """Resolve a source to handles, flattening nested sequences.

        Duplicates in the input are kept as duplicate handles.

        Raises:
            NoCurrentDocumentError: If an element is None and nothing is active.
            DocumentNotFoundError: If an element cannot be resolved.
        """
        return [self._resolve_single(item) for item in _flatten(source)]

    def resolve_one(self, source: Source) -> DocumentHandle:
        """Resolve a source that must name exactly one document.

        Raises:
            AmbiguousSourceError: If resolution yields zero or several handles.
        """
        handles = self.resolve_all(source)
        if len(handles) != 1:
            raise AmbiguousSourceError(len(handles))
        return handles[0]

    def _resolve_single(self, source: Any) -> DocumentHandle:
        if source is None:
            handle = self._current.get_active()
            if handle is None:
                raise NoCurrentDocumentError()
            return handle

        identifier = identifier_of(source)
        if identifier is None:
            raise DocumentNotFoundError(repr(source))

        handle = self._lookup.by_identifier(identifier)
        if handle is None:
            raise DocumentNotFoundError(identifier)

        logger.debug(f"Resolved source {identifier!r} -> {handle.path!r}")
        return handle


def _flatten(source: Source) -> Iterator[Any]:
    if is_multiple(source):
        for item in source:
            yield from _flatten(item)
    else:
        yield source
