"""Deep property access over nested containers.

Free functions that walk a property path through mappings, lists/tuples
and plain attribute objects:

- ``deep_contains``: whether the full path resolves.
- ``deep_get``: the value at the path, or a default.
- ``deep_set``: store a value, creating intermediate containers.
- ``visit``: branch on presence without walking the path twice.

Scalars (strings, numbers, None) are never indexed into; a walk that
reaches one reports the path as missing. A key whose value is None is
present.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Union

from metascry.core.exceptions import InvalidPathError
from metascry.core.types import Factory, Literal, Visitor
from metascry.paths.resolver import DEFAULT_DELIMITER, PathSpec, Step, resolve_path

_MISSING = object()

_SCALARS = (str, bytes, bytearray, int, float, complex, bool)

ThenDo = Union[Callable[..., Any], Visitor, tuple]


def _is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, _SCALARS)


def _step_into(container: Any, step: Step) -> Any:
    """Return the child of ``container`` at ``step``, or ``_MISSING``."""
    if _is_scalar(container):
        return _MISSING

    if isinstance(container, Mapping):
        if step in container:
            return container[step]
        if isinstance(step, int) and str(step) in container:
            return container[str(step)]
        return _MISSING

    if isinstance(container, (list, tuple)):
        if isinstance(step, int) and 0 <= step < len(container):
            return container[step]
        return _MISSING

    if isinstance(step, str) and not step.startswith("_"):
        value = getattr(container, step, _MISSING)
        # bound methods and functions count as missing
        if inspect.isroutine(value):
            return _MISSING
        return value

    return _MISSING


def _walk(root: Any, steps: tuple[Step, ...]) -> Any:
    current = root
    for step in steps:
        current = _step_into(current, step)
        if current is _MISSING:
            return _MISSING
    return current


def _accepts(container: Any, step: Step) -> bool:
    """Whether ``container`` can hold a child at ``step`` without replacement."""
    if _is_scalar(container) or container is _MISSING:
        return False
    if isinstance(container, MutableMapping):
        return True
    if isinstance(container, list):
        return isinstance(step, int) and step >= 0
    if isinstance(container, (Mapping, tuple)):
        return False
    return isinstance(step, str) and hasattr(container, "__dict__")


def _assign(container: Any, step: Step, value: Any) -> None:
    if isinstance(container, MutableMapping):
        if isinstance(step, int) and step not in container and str(step) in container:
            step = str(step)
        container[step] = value
    elif isinstance(container, list):
        if step >= len(container):
            container.extend([None] * (step + 1 - len(container)))
        container[step] = value
    else:
        setattr(container, step, value)


def _unwrap_default(default: Any) -> Any:
    if isinstance(default, Factory):
        return default()
    if isinstance(default, Literal):
        return default.value
    return default


def deep_contains(
    root: Any, path: PathSpec, delimiter: str = DEFAULT_DELIMITER
) -> bool:
    """Check whether ``path`` resolves to a value inside ``root``.

    Args:
        root: Container to search.
        path: Property path (delimited string or sequence of steps).
        delimiter: Separator for string paths.

    Returns:
        True if every step resolves, False as soon as one does not.
    """
    return _walk(root, resolve_path(path, delimiter)) is not _MISSING


def deep_get(
    root: Any,
    path: PathSpec,
    default: Any = None,
    delimiter: str = DEFAULT_DELIMITER,
) -> Any:
    """Get the value at ``path`` inside ``root``.

    Args:
        root: Container to read from.
        path: Property path (delimited string or sequence of steps).
        default: Returned when the path is missing. A ``Factory`` is called
            with no arguments to produce it, only when needed.
        delimiter: Separator for string paths.

    Returns:
        The found value, or the default.

    Example:
        >>> deep_get({"a": {"b": [1, 2]}}, "a.b.1")
        2
        >>> deep_get({}, "a.b", Factory(list))
        []
    """
    value = _walk(root, resolve_path(path, delimiter))
    if value is _MISSING:
        return _unwrap_default(default)
    return value


def deep_set(
    root: Any,
    path: PathSpec,
    value: Any,
    delimiter: str = DEFAULT_DELIMITER,
) -> None:
    """Set the value at ``path`` inside ``root``, creating containers as needed.

    Missing or wrongly shaped intermediates are replaced with a new ``dict``
    (for a following key step) or ``list`` (for a following index step).
    Lists are padded with None up to a new index.

    Args:
        root: Mutable container to write into (mutated in place).
        path: Property path (delimited string or sequence of steps).
        value: Value to store. A ``Factory`` is called with the previous
            value at the path (None if absent) and its result is stored;
            a ``Literal`` is unwrapped.
        delimiter: Separator for string paths.

    Raises:
        InvalidPathError: If the path is empty, holds a negative index, or
            the root cannot hold the first step. Nothing is written then.
    """
    steps = resolve_path(path, delimiter)
    if not steps:
        raise InvalidPathError(path, "cannot replace the root container")
    for step in steps:
        if isinstance(step, int) and step < 0:
            raise InvalidPathError(path, f"negative index {step} cannot be written")
    if not _accepts(root, steps[0]):
        raise InvalidPathError(
            path, f"root of type {type(root).__name__} cannot hold step {steps[0]!r}"
        )

    container = root
    for step, next_step in zip(steps, steps[1:]):
        child = _step_into(container, step)
        if not _accepts(child, next_step):
            child = {} if isinstance(next_step, str) else []
            _assign(container, step, child)
        container = child

    last = steps[-1]
    if isinstance(value, Factory):
        previous = _step_into(container, last)
        value = value(None if previous is _MISSING else previous)
    elif isinstance(value, Literal):
        value = value.value

    _assign(container, last, value)


def visit(
    root: Any,
    path: PathSpec,
    then_do: ThenDo,
    if_exists: bool = True,
    delimiter: str = DEFAULT_DELIMITER,
) -> bool:
    """Walk ``path`` once and invoke callbacks depending on presence.

    Args:
        root: Container to search.
        path: Property path.
        then_do: A ``Visitor``, an ``(on_found, on_missing)`` pair, or a
            single callable. A single callable is called with the found value
            when ``if_exists`` is true and the path exists, or with no
            arguments when ``if_exists`` is false and the path is missing.
        if_exists: Which outcome a single callable handles.
        delimiter: Separator for string paths.

    Returns:
        Whether the path exists.
    """
    value = _walk(root, resolve_path(path, delimiter))
    found = value is not _MISSING

    if isinstance(then_do, tuple):
        then_do = Visitor(*then_do)

    if isinstance(then_do, Visitor):
        if found and then_do.on_found is not None:
            then_do.on_found(value)
        elif not found and then_do.on_missing is not None:
            then_do.on_missing()
    elif found and if_exists:
        then_do(value)
    elif not found and not if_exists:
        then_do()

    return found


class PathAccessible:
    """Mixin giving a container deep-path helper methods.

    Opt in by subclassing alongside a container type::

        class Record(dict, PathAccessible):
            pass

        Record(a={"b": 1}).get_prop("a.b")  # 1
    """

    def has_prop(self, path: PathSpec, then_do: ThenDo | None = None) -> bool:
        """Check for ``path``, optionally visiting the found value."""
        if then_do is not None:
            return visit(self, path, then_do)
        return deep_contains(self, path)

    def get_prop(self, path: PathSpec, default: Any = None) -> Any:
        """Get the value at ``path`` or ``default``."""
        return deep_get(self, path, default)

    def set_prop(self, path: PathSpec, value: Any) -> None:
        """Set the value at ``path``."""
        deep_set(self, path, value)
