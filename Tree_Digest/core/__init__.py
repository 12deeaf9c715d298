# Auto-generated __init__.py

from . import classifier
from .classifier import classify
from . import errors
from .errors import DigestError
from .errors import EnumerationError
from .errors import PathNotFound
from .errors import ReadError
from .errors import UnsupportedKind
from . import models
from .models import ChildEntry
from .models import DirectoryListing
from .models import NodeInfo
from .models import NodeKind
from .models import Outcome
from .models import Value
from . import scanner
from .scanner import list_directory

__all__ = [
    "classifier",
    "errors",
    "models",
    "scanner",
    "ChildEntry",
    "classify",
    "DigestError",
    "DirectoryListing",
    "EnumerationError",
    "list_directory",
    "NodeInfo",
    "NodeKind",
    "Outcome",
    "PathNotFound",
    "ReadError",
    "UnsupportedKind",
    "Value",
]
