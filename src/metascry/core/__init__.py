"""Core configuration, exceptions and types for metascry."""

from .config import ScryConfig
from .exceptions import (
    AggregationError,
    AmbiguousSourceError,
    DocumentNotFoundError,
    DuplicateKeyError,
    InvalidPathError,
    MissingKeyError,
    NoCurrentDocumentError,
    ScryError,
    SourceError,
)
from .types import (
    DocumentRef,
    Factory,
    Literal,
    RawSection,
    StructuralData,
    UpdateOptions,
    Visitor,
)

__all__ = [
    "ScryConfig",
    "ScryError",
    "InvalidPathError",
    "SourceError",
    "NoCurrentDocumentError",
    "DocumentNotFoundError",
    "AmbiguousSourceError",
    "AggregationError",
    "DuplicateKeyError",
    "MissingKeyError",
    "DocumentRef",
    "Factory",
    "Literal",
    "Visitor",
    "UpdateOptions",
    "RawSection",
    "StructuralData",
]
