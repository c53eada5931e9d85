"""Custom exceptions for metascry."""


class ScryError(Exception):
    """Base exception for all metascry errors."""

    pass


class InvalidPathError(ScryError):
    """Property path specification is malformed."""

    def __init__(self, spec: object, reason: str):
        """Initialize exception with the offending spec.

        Args:
            spec: The path specification (or step) that was rejected.
            reason: Human-readable reason.
        """
        self.spec = spec
        self.reason = reason
        super().__init__(f"Invalid property path {spec!r}: {reason}")


class SourceError(ScryError):
    """Source resolution failed."""

    pass


class NoCurrentDocumentError(SourceError):
    """No source was given and no document is active."""

    def __init__(self) -> None:
        super().__init__("No current document is active")


class DocumentNotFoundError(SourceError):
    """Document does not exist."""

    def __init__(self, path: str):
        """Initialize exception with path.

        Args:
            path: Identifier of the document that was not found.
        """
        self.path = path
        super().__init__(f"Document not found: {path}")


class AmbiguousSourceError(SourceError):
    """Source resolved to zero or several documents where one was required."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Expected exactly one document, source resolved to {count}")


class AggregationError(ScryError):
    """Collection aggregation failed."""

    pass


class DuplicateKeyError(AggregationError):
    """Two items produced the same index key."""

    def __init__(self, key: object, path: object):
        self.key = key
        self.path = path
        super().__init__(
            f"Key {key!r} already exists in aggregate object, "
            f"can't index another item by it: {path!r}"
        )


class MissingKeyError(AggregationError):
    """An item has no value at the index key path."""

    def __init__(self, path: object, index: int):
        self.path = path
        self.index = index
        super().__init__(f"Aggregation key not found at path {path!r} (item {index})")
