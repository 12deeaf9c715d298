from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union


# A fixed-size value produced by a primitive: raw digest bytes or an integer sum.
Value = Union[bytes, int]


class NodeKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class NodeInfo:
    """
    Result of classifying a filesystem path.

    Built from a single lstat call:
    - symlinks are never followed, they classify as OTHER
    - size_bytes is only meaningful for regular files
    """
    path: Path
    kind: NodeKind
    size_bytes: int = 0
    is_symlink: bool = False

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class ChildEntry:
    """
    (name, value) pair contributed by a successfully processed child.
    """
    name: str
    value: Value


@dataclass(frozen=True)
class Outcome:
    """
    Result of visiting one node: a value on success, the error otherwise.
    """
    value: Optional[Value] = None
    error: Optional[Exception] = None
    kind: Optional[NodeKind] = None
    children_included: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Value, kind: NodeKind, children_included: int | None = None) -> "Outcome":
        return cls(value=value, kind=kind, children_included=children_included)

    @classmethod
    def failure(cls, error: Exception, kind: NodeKind | None = None) -> "Outcome":
        return cls(error=error, kind=kind)


@dataclass
class DirectoryListing:
    """
    Immediate children of a directory, after enumeration policy is applied.

    Contents are names only; recursion happens in the engine.
    """
    path: Path
    entries: list = field(default_factory=list)
    symlinks_skipped: int = 0
    errors: list = field(default_factory=list)
