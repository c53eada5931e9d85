"""Generic property-path utilities, independent of documents."""

from .collections import group_by, index_by
from .deep import PathAccessible, deep_contains, deep_get, deep_set, visit
from .resolver import DEFAULT_DELIMITER, PathSpec, Step, resolve_path

__all__ = [
    "DEFAULT_DELIMITER",
    "PathSpec",
    "Step",
    "resolve_path",
    "deep_contains",
    "deep_get",
    "deep_set",
    "visit",
    "PathAccessible",
    "index_by",
    "group_by",
]
