"""Test fakes for testing without real infrastructure.

This module provides in-memory implementations of the collaborator
protocols (lookup, active document, frontmatter, structure, content
loading, editing).

Example:
    from tests.fakes import InMemoryDocuments, InMemoryEditor

    store = InMemoryDocuments()
    store.add("a.md", {"status": "draft"}, {"Intro": "Hello"})
"""

from .documents import (
    FIXED_TIME,
    FailingEditor,
    InMemoryContentLoader,
    InMemoryDocuments,
    InMemoryEditor,
    InMemoryFrontmatterProvider,
    InMemoryStructuralProvider,
)

__all__ = [
    "FIXED_TIME",
    "FailingEditor",
    "InMemoryContentLoader",
    "InMemoryDocuments",
    "InMemoryEditor",
    "InMemoryFrontmatterProvider",
    "InMemoryStructuralProvider",
]
