"""Lazily loaded heading sections of a document."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from metascry.core.types import RawSection

if TYPE_CHECKING:
    from metascry.sources.protocols import ContentLoader, DocumentHandle


class Section:
    """Every part of a document under one heading text.

    The text is not read until ``load()`` is awaited; it is then kept on
    the section.
    """

    def __init__(
        self,
        handle: "DocumentHandle",
        heading: str,
        loader: "ContentLoader",
    ):
        self.handle = handle
        self.heading = heading
        self.ranges: list[RawSection] = []
        self._loader = loader
        self._text: Optional[str] = None

    @property
    def level(self) -> int:
        """Level of the first occurrence of the heading."""
        return self.ranges[0].level if self.ranges else 0

    @property
    def loaded(self) -> bool:
        return self._text is not None

    async def load(self) -> str:
        """Load (once) and return the section's markdown."""
        if self._text is None:
            self._text = await self._loader.load_section(self.handle, self.heading)
        return self._text

    def __repr__(self) -> str:
        return (
            f"Section(heading={self.heading!r}, level={self.level}, "
            f"occurrences={len(self.ranges)})"
        )


class Sections(dict):
    """Heading text -> ``Section``, in document order."""

    @property
    def headings(self) -> list[str]:
        return list(self.keys())


def build_sections(
    handle: "DocumentHandle",
    raw_sections: Iterable[RawSection],
    loader: "ContentLoader",
) -> Sections:
    """Group raw headings by text into lazily loadable sections.

    Args:
        handle: Document the headings belong to.
        raw_sections: Headings as reported by the structural provider.
        loader: Collaborator used when a section's text is requested.

    Returns:
        Sections keyed by heading, first occurrence order.
    """
    sections = Sections()
    for raw in raw_sections:
        section = sections.get(raw.heading)
        if section is None:
            section = sections[raw.heading] = Section(handle, raw.heading, loader)
        section.ranges.append(raw)
    return sections
