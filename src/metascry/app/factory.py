"""Session factory functions.

Wire collaborators into a ScrySession, either explicitly or from a
filesystem vault.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger

from ..core.config import ScryConfig
from ..metadata.aggregator import MetadataAggregator
from ..metadata.cache import CacheStore
from ..services.scrier import Scrier
from ..sources.protocols import (
    ContentLoader,
    CurrentDocumentProvider,
    DocumentLookup,
    FrontmatterProvider,
    MutationEditor,
    StructuralProvider,
)
from ..sources.resolver import SourceResolver
from .session import ScrySession


def create_session(
    config: Optional[ScryConfig] = None,
    *,
    lookup: DocumentLookup,
    current: CurrentDocumentProvider,
    frontmatter: FrontmatterProvider,
    structure: StructuralProvider,
    loader: ContentLoader,
    editor: MutationEditor,
) -> ScrySession:
    """Create a session from explicit collaborators.

    Args:
        config: Library configuration (defaults to ScryConfig()).
        lookup: Identifier -> handle resolution.
        current: Active document provider.
        frontmatter: Frontmatter provider.
        structure: Structural provider.
        loader: Section content loader.
        editor: Mutation editor.

    Returns:
        A new session with a fresh cache store.
    """
    config = config or ScryConfig()
    cache = CacheStore()
    resolver = SourceResolver(lookup=lookup, current=current)
    aggregator = MetadataAggregator(
        lookup=lookup,
        frontmatter=frontmatter,
        structure=structure,
        loader=loader,
        editor=editor,
        cache=cache,
        config=config,
    )
    scrier = Scrier(resolver, aggregator, config)

    logger.info("metascry session opened")
    return ScrySession(
        config=config,
        cache=cache,
        resolver=resolver,
        aggregator=aggregator,
        scrier=scrier,
    )


def open_vault(
    root: Optional[Path | str] = None,
    config: Optional[ScryConfig] = None,
) -> ScrySession:
    """Create a session over a filesystem vault.

    Args:
        root: Vault directory (defaults to ``config.vault_path``).
        config: Library configuration.

    Returns:
        A session whose ``vault`` attribute exposes the Vault (e.g. to set
        the active document).
    """
    from ..vault import Vault, VaultEditor, VaultFrontmatter, VaultSectionLoader, VaultStructure

    config = config or ScryConfig()
    vault = Vault(root if root is not None else config.vault_path, config)
    logger.debug(f"Opening vault: {vault.root}")

    session = create_session(
        config,
        lookup=vault,
        current=vault,
        frontmatter=VaultFrontmatter(vault),
        structure=VaultStructure(vault),
        loader=VaultSectionLoader(vault),
        editor=VaultEditor(vault),
    )
    session.vault = vault
    return session
