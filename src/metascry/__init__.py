"""metascry - unified metadata access for markdown documents.

Merges each document's frontmatter, structural data and session cache
into one record, resolves single or multiple document sources, and
offers generic deep-path utilities for nested data.
"""

from metascry.app import ScrySession, create_session, open_vault
from metascry.core import (
    AmbiguousSourceError,
    DocumentNotFoundError,
    DocumentRef,
    DuplicateKeyError,
    Factory,
    InvalidPathError,
    Literal,
    MissingKeyError,
    NoCurrentDocumentError,
    ScryConfig,
    ScryError,
    UpdateOptions,
    Visitor,
)
from metascry.metadata import CacheStore, Metadata, MetadataAggregator, Section, Sections
from metascry.paths import (
    PathAccessible,
    deep_contains,
    deep_get,
    deep_set,
    group_by,
    index_by,
    resolve_path,
    visit,
)
from metascry.services import Scrier, dispatch, dispatch_async
from metascry.sources import SourceResolver

__version__ = "0.1.0"

__all__ = [
    "ScrySession",
    "create_session",
    "open_vault",
    "ScryConfig",
    "ScryError",
    "InvalidPathError",
    "NoCurrentDocumentError",
    "DocumentNotFoundError",
    "AmbiguousSourceError",
    "DuplicateKeyError",
    "MissingKeyError",
    "DocumentRef",
    "Factory",
    "Literal",
    "Visitor",
    "UpdateOptions",
    "CacheStore",
    "Metadata",
    "MetadataAggregator",
    "Section",
    "Sections",
    "PathAccessible",
    "resolve_path",
    "deep_contains",
    "deep_get",
    "deep_set",
    "visit",
    "index_by",
    "group_by",
    "Scrier",
    "dispatch",
    "dispatch_async",
    "SourceResolver",
]
