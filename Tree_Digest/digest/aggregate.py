import os
from typing import Iterable, List, Sequence

from Tree_Digest.core.models import ChildEntry, Value


# ============================================================
# Canonical ordering + descriptor layout
# ============================================================

def name_key(name: str) -> bytes:
    """
    Sort key for a child name: its raw filesystem bytes.

    Byte order is total and locale-independent.
    """
    return os.fsencode(name)


def sort_children(children: Iterable[ChildEntry]) -> List[ChildEntry]:
    return sorted(children, key=lambda c: name_key(c.name))


def build_descriptor(children: Sequence[ChildEntry], to_bytes) -> bytes:
    """
    Concatenate name bytes followed immediately by value bytes, per child,
    in the order given. Callers pass children already sorted.
    """
    parts = []
    for child in children:
        parts.append(name_key(child.name))
        parts.append(to_bytes(child.value))
    return b"".join(parts)


def combine(children: Iterable[ChildEntry], primitive) -> Value:
    """
    Combine a directory's (name, value) pairs into one value.

    The result depends only on the set of pairs, never on the order the
    filesystem reported them in. An empty sequence is a well-defined
    constant for each primitive.
    """
    return primitive.aggregate(sort_children(children))
