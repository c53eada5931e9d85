"""Apply a per-document operation to every document a source names.

The result shape depends on the shape of the source, not on how many
documents it resolved to:

- a single (non-sequence) source gives the bare result;
- a list/tuple source gives ``{identifier: result}`` in resolution order,
  even when it holds one element, and ``{}`` when it is empty.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar, Union

from metascry.sources.protocols import DocumentHandle
from metascry.sources.resolver import Source, SourceResolver, is_multiple

R = TypeVar("R")

ScryResult = Union[R, dict[str, R]]


def dispatch(
    resolver: SourceResolver,
    source: Source,
    operation: Callable[[DocumentHandle], R],
) -> ScryResult:
    """Run ``operation`` for each document in ``source``.

    Args:
        resolver: Resolves the source to handles.
        source: Source specification.
        operation: Called with each resolved handle.

    Returns:
        Bare result for a single source, else a dict keyed by identifier.
    """
    if not is_multiple(source):
        return operation(resolver.resolve_one(source))

    results: dict[str, Any] = {}
    for handle in resolver.resolve_all(source):
        results[handle.path] = operation(handle)
    return results


async def dispatch_async(
    resolver: SourceResolver,
    source: Source,
    operation: Callable[[DocumentHandle], Awaitable[R]],
) -> ScryResult:
    """Async variant of ``dispatch``; documents are processed one at a time."""
    if not is_multiple(source):
        return await operation(resolver.resolve_one(source))

    results: dict[str, Any] = {}
    for handle in resolver.resolve_all(source):
        results[handle.path] = await operation(handle)
    return results
