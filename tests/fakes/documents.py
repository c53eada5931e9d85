"""In-memory collaborator fakes for testing.

These implementations let the aggregator, resolver and API be tested
without a filesystem. Each fake implements the corresponding protocol
from metascry.sources.protocols over one shared InMemoryDocuments store.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from metascry.core.types import DocumentRef, RawSection, StructuralData

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5)


@dataclass
class InMemoryDocuments:
    """Shared document store; also the lookup and active-document fakes."""

    frontmatter: dict[str, Optional[dict[str, Any]]] = field(default_factory=dict)
    sections: dict[str, list[RawSection]] = field(default_factory=dict)
    contents: dict[str, dict[str, str]] = field(default_factory=dict)
    active: Optional[str] = None
    load_calls: list[tuple[str, str]] = field(default_factory=list)
    edits: list[tuple[str, str, Any]] = field(default_factory=list)

    def add(
        self,
        path: str,
        frontmatter: Optional[dict[str, Any]] = None,
        sections: Optional[dict[str, str]] = None,
    ) -> DocumentRef:
        """Add a document; ``sections`` maps heading -> body text."""
        self.frontmatter[path] = frontmatter
        raw = []
        for line, heading in enumerate(sections or {}):
            raw.append(RawSection(heading=heading, level=2, start_line=line, end_line=line + 1))
        self.sections[path] = raw
        self.contents[path] = dict(sections or {})
        return DocumentRef(path)

    def by_identifier(self, identifier: str) -> Optional[DocumentRef]:
        if identifier in self.frontmatter:
            return DocumentRef(identifier)
        return None

    def get_active(self) -> Optional[DocumentRef]:
        return DocumentRef(self.active) if self.active else None


@dataclass
class InMemoryFrontmatterProvider:
    store: InMemoryDocuments

    def get(self, handle) -> Optional[Mapping[str, Any]]:
        return self.store.frontmatter.get(handle.path)


@dataclass
class InMemoryStructuralProvider:
    store: InMemoryDocuments

    def get(self, handle) -> StructuralData:
        return StructuralData(
            identifier=handle.path,
            timestamps={"ctime": FIXED_TIME, "mtime": FIXED_TIME, "size": 42},
            raw_sections=list(self.store.sections.get(handle.path, [])),
        )


@dataclass
class InMemoryContentLoader:
    store: InMemoryDocuments

    async def load_section(self, handle, heading: str) -> str:
        self.store.load_calls.append((handle.path, heading))
        return self.store.contents.get(handle.path, {}).get(heading, "")


@dataclass
class InMemoryEditor:
    """Editor fake applying writes to the store and recording them."""

    store: InMemoryDocuments

    async def patch(self, handle, data: Mapping[str, Any]) -> None:
        self.store.edits.append(("patch", handle.path, copy.deepcopy(dict(data))))
        current = self.store.frontmatter.get(handle.path) or {}
        current.update(copy.deepcopy(dict(data)))
        self.store.frontmatter[handle.path] = current

    async def set(self, handle, data: Mapping[str, Any]) -> None:
        self.store.edits.append(("set", handle.path, copy.deepcopy(dict(data))))
        self.store.frontmatter[handle.path] = copy.deepcopy(dict(data))

    async def clear(self, handle, keys: list[str]) -> None:
        self.store.edits.append(("clear", handle.path, list(keys)))
        current = self.store.frontmatter.get(handle.path) or {}
        for key in keys:
            current.pop(key, None)


class FailingEditor:
    """Editor fake whose every write raises."""

    def __init__(self, error: Exception):
        self.error = error

    async def patch(self, handle, data) -> None:
        raise self.error

    async def set(self, handle, data) -> None:
        raise self.error

    async def clear(self, handle, keys) -> None:
        raise self.error
