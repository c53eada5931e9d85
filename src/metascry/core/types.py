"""Type definitions for metascry."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class DocumentRef:
    """Concrete handle for a document, identified by its vault-relative path."""

    path: str

    @property
    def name(self) -> str:
        """File name including extension."""
        return PurePosixPath(self.path).name

    @property
    def stem(self) -> str:
        """File name without extension."""
        return PurePosixPath(self.path).stem

    @property
    def extension(self) -> str:
        """Extension without the leading dot ("" if none)."""
        return PurePosixPath(self.path).suffix.lstrip(".")

    @property
    def folder(self) -> str:
        """Containing folder ("" for the vault root)."""
        parent = str(PurePosixPath(self.path).parent)
        return "" if parent == "." else parent

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class Literal(Generic[T]):
    """A value to be used exactly as given, even if it is callable."""

    value: T


@dataclass(frozen=True)
class Factory(Generic[T]):
    """A value produced on demand.

    As a default for ``deep_get`` the function is called with no arguments,
    and only when the path is missing. As a value for ``deep_set`` it is
    called with the previous value at the path (``None`` if absent), which
    gives read-modify-write updates in a single walk.
    """

    fn: Callable[..., T]

    def __call__(self, *args: Any) -> T:
        return self.fn(*args)


@dataclass(frozen=True)
class Visitor:
    """Pair of callbacks for ``visit``."""

    on_found: Optional[Callable[[Any], Any]] = None
    on_missing: Optional[Callable[[], Any]] = None


@dataclass(frozen=True)
class UpdateOptions:
    """Options for frontmatter writes.

    Attributes:
        to_values_file: Write to the document's companion values file.
        prototype: Write to the folder's shared prototype document.
    """

    to_values_file: bool = False
    prototype: bool = False


@dataclass(frozen=True)
class RawSection:
    """A heading and the line range it spans, as reported by a provider."""

    heading: str
    level: int
    start_line: int
    end_line: int


@dataclass
class StructuralData:
    """File-level facts about a document that are not written in it."""

    identifier: str
    timestamps: dict[str, Any] = field(default_factory=dict)
    raw_sections: list[RawSection] = field(default_factory=list)
