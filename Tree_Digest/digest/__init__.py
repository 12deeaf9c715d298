# Auto-generated __init__.py

from . import aggregate
from .aggregate import build_descriptor
from .aggregate import combine
from .aggregate import sort_children
from . import engine
from .engine import DigestEngine
from .engine import digest_tree
from . import leaf
from .leaf import valuate
from . import primitives
from .primitives import AdditiveChecksum
from .primitives import Primitive
from .primitives import Sha256
from .primitives import get_primitive

__all__ = [
    "aggregate",
    "engine",
    "leaf",
    "primitives",
    "AdditiveChecksum",
    "build_descriptor",
    "combine",
    "DigestEngine",
    "digest_tree",
    "get_primitive",
    "Primitive",
    "Sha256",
    "sort_children",
    "valuate",
]
