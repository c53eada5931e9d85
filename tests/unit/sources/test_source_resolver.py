"""Tests for SourceResolver."""

import pytest

from metascry.core.exceptions import (
    AmbiguousSourceError,
    DocumentNotFoundError,
    NoCurrentDocumentError,
)
from metascry.core.types import DocumentRef
from metascry.sources import SourceResolver, identifier_of, is_multiple


class TestResolveAll:
    """Tests for resolve_all."""

    def test_identifier(self, resolver: SourceResolver):
        """A string resolves through the lookup."""
        assert resolver.resolve_all("notes/Idea.md") == [DocumentRef("notes/Idea.md")]

    def test_handle(self, resolver: SourceResolver):
        """A handle is re-resolved by its path."""
        assert resolver.resolve_all(DocumentRef("notes/Other.md")) == [DocumentRef("notes/Other.md")]

    def test_metadata_record(self, resolver: SourceResolver):
        """A metadata mapping resolves by its file.path."""
        record = {"status": "x", "file": {"path": "notes/Idea.md"}}
        assert resolver.resolve_all(record) == [DocumentRef("notes/Idea.md")]

    def test_nested_sequences_flattened(self, resolver: SourceResolver):
        """Nested lists collapse into one flat list in order."""
        handles = resolver.resolve_all(["notes/Idea.md", ["notes/Other.md", ("notes/Empty.md",)]])
        assert [h.path for h in handles] == ["notes/Idea.md", "notes/Other.md", "notes/Empty.md"]

    def test_duplicates_preserved(self, resolver: SourceResolver):
        """Duplicate identifiers stay duplicated."""
        handles = resolver.resolve_all(["notes/Idea.md", "notes/Idea.md"])
        assert len(handles) == 2

    def test_empty_sequence(self, resolver: SourceResolver):
        """An empty list resolves to nothing."""
        assert resolver.resolve_all([]) == []

    def test_none_uses_active_document(self, resolver: SourceResolver, documents):
        """None resolves to the active document."""
        documents.active = "notes/Other.md"
        assert resolver.resolve_all(None) == [DocumentRef("notes/Other.md")]

    def test_none_without_active_document(self, resolver: SourceResolver):
        """None with nothing active raises."""
        with pytest.raises(NoCurrentDocumentError):
            resolver.resolve_all(None)

    def test_unknown_identifier(self, resolver: SourceResolver):
        """Unresolvable identifiers raise with the identifier attached."""
        with pytest.raises(DocumentNotFoundError) as exc_info:
            resolver.resolve_all(["notes/Idea.md", "missing.md"])
        assert exc_info.value.path == "missing.md"

    def test_object_without_identifier(self, resolver: SourceResolver):
        """Objects carrying no path cannot be resolved."""
        with pytest.raises(DocumentNotFoundError):
            resolver.resolve_all({"status": "orphan"})


class TestResolveOne:
    """Tests for resolve_one."""

    def test_single(self, resolver: SourceResolver):
        """A single source resolves to its handle."""
        assert resolver.resolve_one("notes/Idea.md").path == "notes/Idea.md"

    def test_one_element_list(self, resolver: SourceResolver):
        """A one-element list is still exactly one document."""
        assert resolver.resolve_one(["notes/Idea.md"]).path == "notes/Idea.md"

    def test_many_is_ambiguous(self, resolver: SourceResolver):
        """Several documents raise."""
        with pytest.raises(AmbiguousSourceError) as exc_info:
            resolver.resolve_one(["notes/Idea.md", "notes/Other.md"])
        assert exc_info.value.count == 2

    def test_zero_is_ambiguous(self, resolver: SourceResolver):
        """No documents raise."""
        with pytest.raises(AmbiguousSourceError):
            resolver.resolve_one([])


class TestSourceHelpers:
    """Tests for is_multiple and identifier_of."""

    @pytest.mark.parametrize(
        "source,expected",
        [(None, False), ("a.md", False), (DocumentRef("a.md"), False), ([], True), (("a.md",), True)],
    )
    def test_is_multiple(self, source, expected):
        """Only lists and tuples are sequence sources."""
        assert is_multiple(source) is expected

    def test_identifier_of(self):
        """Identifiers come from strings, handles and records."""
        assert identifier_of("a.md") == "a.md"
        assert identifier_of(DocumentRef("b.md")) == "b.md"
        assert identifier_of({"file": {"path": "c.md"}}) == "c.md"
        assert identifier_of({"path": "d.md"}) == "d.md"
        assert identifier_of(42) is None
