"""Source resolution and collaborator interfaces."""

from .protocols import (
    ContentLoader,
    CurrentDocumentProvider,
    DocumentHandle,
    DocumentLookup,
    FrontmatterProvider,
    MutationEditor,
    StructuralProvider,
)
from .resolver import Source, SourceResolver, identifier_of, is_multiple

__all__ = [
    "ContentLoader",
    "CurrentDocumentProvider",
    "DocumentHandle",
    "DocumentLookup",
    "FrontmatterProvider",
    "MutationEditor",
    "StructuralProvider",
    "Source",
    "SourceResolver",
    "identifier_of",
    "is_multiple",
]
