# Auto-generated __init__.py

from . import app
from . import fingerprint
from .fingerprint import handle_request
from .fingerprint import run_interactive
from .fingerprint import run_paths
from . import settings
from .settings import load_settings

__all__ = [
    "app",
    "fingerprint",
    "settings",
    "handle_request",
    "load_settings",
    "run_interactive",
    "run_paths",
]
