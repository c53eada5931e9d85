"""Property path parsing.

A property path is either a delimited string (``"file.sections.Intro"``)
or an explicit sequence of steps (``["tags", 0]``). Both normalize to a
tuple of ``str`` key steps and ``int`` index steps; the empty tuple is
the root container itself.
"""

from __future__ import annotations

from typing import Sequence, Union

from metascry.core.exceptions import InvalidPathError

Step = Union[str, int]
PathSpec = Union[str, Sequence[Step], None]

DEFAULT_DELIMITER = "."


def resolve_path(spec: PathSpec, delimiter: str = DEFAULT_DELIMITER) -> tuple[Step, ...]:
    """Normalize a path specification to a tuple of steps.

    Args:
        spec: Delimited string, list/tuple of steps, or None.
        delimiter: Separator for string specs.

    Returns:
        Tuple of steps; ``()`` for an empty spec.

    Raises:
        InvalidPathError: If a step is neither ``str`` nor ``int``, or the
            spec itself is of an unsupported type.

    Example:
        >>> resolve_path("tags.0.name")
        ('tags', 0, 'name')
    """
    if spec is None:
        return ()

    if isinstance(spec, str):
        if not delimiter:
            raise InvalidPathError(spec, "delimiter must not be empty")
        return tuple(
            int(segment) if segment.isascii() and segment.isdigit() else segment
            for segment in spec.split(delimiter)
            if segment
        )

    if isinstance(spec, (list, tuple)):
        for step in spec:
            # bool is an int subclass but never a meaningful index
            if isinstance(step, bool) or not isinstance(step, (str, int)):
                raise InvalidPathError(spec, f"step {step!r} is not a str or int")
        return tuple(spec)

    raise InvalidPathError(spec, f"unsupported path type {type(spec).__name__}")
