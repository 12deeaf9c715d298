import hashlib
from typing import Dict, Sequence

from Tree_Digest.core.models import ChildEntry, Value
from Tree_Digest.digest.aggregate import build_descriptor


# ============================================================
# Primitive base
# ============================================================

class Primitive:
    """
    A combining primitive: turns a byte stream into a fixed-size value and
    renders values for display and span tags.

    Subclasses provide new(), to_bytes() and render(). The default
    aggregate() hashes the descriptor buffer of the sorted children.
    """
    name: str = ""
    tag_key: str = ""
    digest_size: int = 0

    def new(self):
        raise NotImplementedError

    def digest(self, data: bytes) -> Value:
        acc = self.new()
        acc.update(data)
        return acc.value()

    def aggregate(self, children: Sequence[ChildEntry]) -> Value:
        return self.digest(build_descriptor(children, self.to_bytes))

    def to_bytes(self, value: Value) -> bytes:
        raise NotImplementedError

    def render(self, value: Value) -> str:
        raise NotImplementedError

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"


# ============================================================
# SHA-256
# ============================================================

class _HashlibAccumulator:
    def __init__(self, algorithm: str):
        self._h = hashlib.new(algorithm)

    def update(self, data: bytes) -> None:
        self._h.update(data)

    def value(self) -> bytes:
        return self._h.digest()


class Sha256(Primitive):
    name = "sha256"
    tag_key = "sha256_hex"
    digest_size = 32

    def new(self):
        return _HashlibAccumulator("sha256")

    def to_bytes(self, value: Value) -> bytes:
        return value

    def render(self, value: Value) -> str:
        return value.hex()


# ============================================================
# Additive checksum
# ============================================================

CHECKSUM_MODULUS = 2 ** 64


class _SumAccumulator:
    def __init__(self):
        self._total = 0

    def update(self, data: bytes) -> None:
        self._total = (self._total + sum(data)) % CHECKSUM_MODULUS

    def value(self) -> int:
        return self._total


class AdditiveChecksum(Primitive):
    """
    Sum of unsigned byte values modulo 2**64.

    A directory's value is the modular sum of its children's values, so
    names do not participate and the result equals the sum over every
    descendant regular file regardless of tree shape.
    """
    name = "checksum"
    tag_key = "checksum"
    digest_size = 8

    def new(self):
        return _SumAccumulator()

    def aggregate(self, children: Sequence[ChildEntry]) -> int:
        total = 0
        for child in children:
            total = (total + child.value) % CHECKSUM_MODULUS
        return total

    def to_bytes(self, value: Value) -> bytes:
        return int(value).to_bytes(self.digest_size, "big")

    def render(self, value: Value) -> str:
        return str(value)


# ============================================================
# Registry
# ============================================================

PRIMITIVES: Dict[str, Primitive] = {
    p.name: p for p in (Sha256(), AdditiveChecksum())
}

DEFAULT_PRIMITIVE = "sha256"


def get_primitive(name: str | None = None) -> Primitive:
    name = (name or DEFAULT_PRIMITIVE).strip().lower()
    try:
        return PRIMITIVES[name]
    except KeyError:
        known = ", ".join(sorted(PRIMITIVES))
        raise ValueError(f"Unknown digest algorithm '{name}' (expected one of: {known})") from None
