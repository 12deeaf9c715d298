# Auto-generated __init__.py

from . import conftest
from . import test_aggregate
from . import test_classifier
from . import test_cli
from . import test_engine
from . import test_leaf
from . import test_models
from . import test_otel
from . import test_primitives
from . import test_scanner
from . import test_settings
from . import test_tracing

__all__ = [
    "conftest",
    "test_aggregate",
    "test_classifier",
    "test_cli",
    "test_engine",
    "test_leaf",
    "test_models",
    "test_otel",
    "test_primitives",
    "test_scanner",
    "test_settings",
    "test_tracing",
]
