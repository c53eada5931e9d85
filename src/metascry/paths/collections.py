"""Reducers over lists of nested records, keyed by a deep property path.

Key values that cannot be dict keys are normalised: lists and tuples
become tuples, mappings become tuples of ``(key, value)`` pairs, sets
become frozensets, and any other unhashable value becomes its ``str()``.
Grouping notes by ``tags`` therefore buckets them under ``("a", "b")``.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any, Iterable

from metascry.core.exceptions import DuplicateKeyError, MissingKeyError
from metascry.paths.deep import deep_get
from metascry.paths.resolver import PathSpec


def _hashable(key: Any) -> Any:
    if isinstance(key, Mapping):
        return tuple((name, _hashable(value)) for name, value in key.items())
    if isinstance(key, (list, tuple)):
        return tuple(_hashable(item) for item in key)
    if isinstance(key, (set, frozenset)):
        return frozenset(key)
    if not isinstance(key, Hashable):
        return str(key)
    return key


def index_by(items: Iterable[Any], key_path: PathSpec) -> dict[Any, Any]:
    """Index items by a property that is unique among them.

    Args:
        items: Records to index.
        key_path: Path to the unique key within each record.

    Returns:
        Dict mapping each key to its record, in input order.

    Raises:
        MissingKeyError: If a record has no value (or None) at ``key_path``.
        DuplicateKeyError: If two records share a key.
    """
    result: dict[Any, Any] = {}

    for index, item in enumerate(items):
        key = deep_get(item, key_path)
        if key is None:
            raise MissingKeyError(key_path, index)
        key = _hashable(key)
        if key in result:
            raise DuplicateKeyError(key, key_path)
        result[key] = item

    return result


def group_by(items: Iterable[Any], key_path: PathSpec) -> dict[Any, list[Any]]:
    """Group items into buckets by the value at ``key_path``.

    None items, and items without the key, land in the ``""`` bucket.
    """
    result: dict[Any, list[Any]] = {}

    for item in items:
        key = "" if item is None else _hashable(deep_get(item, key_path, ""))
        result.setdefault(key, []).append(item)

    return result
