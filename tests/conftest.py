"""Pytest configuration and fixtures."""

import pytest

from metascry.app import ScrySession, create_session
from metascry.core.config import ScryConfig
from metascry.metadata.aggregator import MetadataAggregator
from metascry.metadata.cache import CacheStore
from metascry.sources.resolver import SourceResolver
from tests.fakes import (
    InMemoryContentLoader,
    InMemoryDocuments,
    InMemoryEditor,
    InMemoryFrontmatterProvider,
    InMemoryStructuralProvider,
)


@pytest.fixture
def config() -> ScryConfig:
    """Provide a default configuration."""
    return ScryConfig()


@pytest.fixture
def documents() -> InMemoryDocuments:
    """Provide an in-memory store with a few documents."""
    store = InMemoryDocuments()
    store.add(
        "notes/Idea.md",
        {"status": "draft", "tags": ["garden", "python"], "stats": {"views": 1}},
        {"Intro": "Hello there.", "Details": "More text."},
    )
    store.add("notes/Other.md", {"status": "done", "rating": 3})
    store.add("notes/Empty.md", None)
    return store


@pytest.fixture
def cache_store() -> CacheStore:
    """Provide an empty cache store."""
    return CacheStore()


@pytest.fixture
def aggregator(
    documents: InMemoryDocuments, cache_store: CacheStore, config: ScryConfig
) -> MetadataAggregator:
    """Provide an aggregator wired to the in-memory fakes."""
    return MetadataAggregator(
        lookup=documents,
        frontmatter=InMemoryFrontmatterProvider(documents),
        structure=InMemoryStructuralProvider(documents),
        loader=InMemoryContentLoader(documents),
        editor=InMemoryEditor(documents),
        cache=cache_store,
        config=config,
    )


@pytest.fixture
def resolver(documents: InMemoryDocuments) -> SourceResolver:
    """Provide a source resolver over the in-memory store."""
    return SourceResolver(lookup=documents, current=documents)


@pytest.fixture
def session(documents: InMemoryDocuments, config: ScryConfig) -> ScrySession:
    """Provide a session wired to the in-memory fakes."""
    session = create_session(
        config,
        lookup=documents,
        current=documents,
        frontmatter=InMemoryFrontmatterProvider(documents),
        structure=InMemoryStructuralProvider(documents),
        loader=InMemoryContentLoader(documents),
        editor=InMemoryEditor(documents),
    )
    yield session
    session.close()
