"""Metadata collaborators backed by a filesystem ``Vault``."""

from __future__ import annotations

from typing import Any, Mapping

from loguru import logger

from metascry.core.types import DocumentRef, RawSection, StructuralData
from metascry.metadata.parsing import (
    extract_headings,
    extract_section,
    parse_frontmatter,
    render_frontmatter,
)
from metascry.vault.filesystem import Vault


class VaultFrontmatter:
    """Frontmatter provider reading YAML blocks from vault files."""

    def __init__(self, vault: Vault):
        self._vault = vault

    def get(self, handle: DocumentRef) -> dict[str, Any]:
        return parse_frontmatter(self._vault.read_text(handle)).data


class VaultStructure:
    """Structural provider: file stats and headings.

    Heading line numbers count from the top of the file, frontmatter
    included.
    """

    def __init__(self, vault: Vault):
        self._vault = vault

    def get(self, handle: DocumentRef) -> StructuralData:
        parsed = parse_frontmatter(self._vault.read_text(handle))
        offset = parsed.body_offset
        sections = [
            RawSection(
                heading=raw.heading,
                level=raw.level,
                start_line=raw.start_line + offset,
                end_line=raw.end_line + offset,
            )
            for raw in extract_headings(parsed.content)
        ]
        return StructuralData(
            identifier=handle.path,
            timestamps=self._vault.stat(handle),
            raw_sections=sections,
        )


class VaultSectionLoader:
    """Content loader returning the markdown under a heading."""

    def __init__(self, vault: Vault):
        self._vault = vault

    async def load_section(self, handle: DocumentRef, heading: str) -> str:
        body = parse_frontmatter(self._vault.read_text(handle)).content
        logger.debug(f"Loading section {heading!r} of {handle.path!r}")
        return extract_section(body, heading)


class VaultEditor:
    """Mutation editor rewriting the frontmatter block of vault files.

    The document body is preserved byte for byte; only the YAML block is
    regenerated.
    """

    def __init__(self, vault: Vault):
        self._vault = vault

    async def patch(self, handle: DocumentRef, data: Mapping[str, Any]) -> None:
        def update(frontmatter: dict[str, Any]) -> dict[str, Any]:
            frontmatter.update(data)
            return frontmatter

        self._rewrite(handle, update)

    async def set(self, handle: DocumentRef, data: Mapping[str, Any]) -> None:
        self._rewrite(handle, lambda _: dict(data))

    async def clear(self, handle: DocumentRef, keys: list[str]) -> None:
        def remove(frontmatter: dict[str, Any]) -> dict[str, Any]:
            for key in keys:
                frontmatter.pop(key, None)
            return frontmatter

        self._rewrite(handle, remove)

    def _rewrite(self, handle: DocumentRef, change) -> None:
        """Apply ``change`` to the frontmatter and write the document back.

        Raises:
            yaml.YAMLError: If the existing block is not valid YAML; the
                file is left untouched.
        """
        parsed = parse_frontmatter(self._vault.read_text(handle), strict=True)
        frontmatter = change(dict(parsed.data))
        self._vault.write_text(handle, render_frontmatter(frontmatter, parsed.content))
