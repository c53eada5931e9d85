"""Filesystem vault: a directory of markdown documents.

``Vault`` resolves identifiers (paths relative to the vault root), tracks
the active document and performs raw text I/O through fsspec. The
metadata collaborators in ``metascry.vault.providers`` build on it.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path, PurePosixPath
from typing import Any, Optional

import fsspec
from loguru import logger

from metascry.core.config import ScryConfig
from metascry.core.exceptions import DocumentNotFoundError
from metascry.core.types import DocumentRef


class Vault:
    """A directory of markdown documents.

    Example:
        vault = Vault("~/notes")
        vault.set_active("Ideas/Garden")        # ".md" is implied
        vault.by_identifier("Ideas/Garden.md")  # DocumentRef("Ideas/Garden.md")
    """

    def __init__(self, root: Path | str, config: Optional[ScryConfig] = None):
        """Initialize Vault.

        Args:
            root: Vault root directory.
            config: Library configuration (extension, encoding).
        """
        self._config = config or ScryConfig()
        self._root = Path(root).expanduser().resolve()
        self._fs = fsspec.filesystem("file")
        self._active: Optional[DocumentRef] = None

    @property
    def root(self) -> Path:
        """Resolved vault root."""
        return self._root

    # -------------------------------------------------------------------------
    # DocumentLookup / CurrentDocumentProvider
    # -------------------------------------------------------------------------

    def by_identifier(self, identifier: str) -> Optional[DocumentRef]:
        """Resolve an identifier to a handle if the file exists.

        Identifiers without an extension get the default one appended.
        Identifiers escaping the vault root never resolve.
        """
        relative = self._normalize(identifier)
        if relative is None:
            return None

        if not self._fs.isfile(str(self._root / relative)):
            logger.debug(f"No such document in vault: {identifier!r}")
            return None
        return DocumentRef(relative)

    def get_active(self) -> Optional[DocumentRef]:
        return self._active

    def set_active(self, identifier: Optional[str]) -> Optional[DocumentRef]:
        """Mark a document as active (None deactivates).

        Raises:
            DocumentNotFoundError: If the identifier does not resolve.
        """
        if identifier is None:
            self._active = None
            return None

        handle = self.by_identifier(identifier)
        if handle is None:
            raise DocumentNotFoundError(identifier)
        self._active = handle
        logger.debug(f"Active document: {handle.path!r}")
        return handle

    # -------------------------------------------------------------------------
    # Raw I/O
    # -------------------------------------------------------------------------

    def full_path(self, handle: DocumentRef) -> Path:
        return self._root / handle.path

    def read_text(self, handle: DocumentRef) -> str:
        """Read a document's full text.

        Raises:
            OSError: If the file cannot be read.
        """
        with self._fs.open(str(self.full_path(handle)), "r", encoding=self._config.encoding) as f:
            return f.read()

    def write_text(self, handle: DocumentRef, content: str) -> None:
        """Overwrite a document's full text.

        Raises:
            OSError: If the file cannot be written.
        """
        with self._fs.open(str(self.full_path(handle)), "w", encoding=self._config.encoding) as f:
            f.write(content)
        logger.info(f"Wrote document: {handle.path!r} ({len(content)} chars)")

    def stat(self, handle: DocumentRef) -> dict[str, Any]:
        """Timestamps and size for a document."""
        info = self._fs.info(str(self.full_path(handle)))
        mtime = datetime.fromtimestamp(info["mtime"])
        created = info.get("created")
        return {
            "ctime": datetime.fromtimestamp(created) if created else mtime,
            "mtime": mtime,
            "size": info["size"],
        }

    def _normalize(self, identifier: str) -> Optional[str]:
        path = PurePosixPath(identifier.replace("\\", "/").lstrip("/"))
        if not path.parts or ".." in path.parts:
            return None
        if not path.suffix:
            path = path.with_name(path.name + self._config.default_extension)
        return str(path)
