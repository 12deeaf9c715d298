# Auto-generated __init__.py

from . import interface
from .interface import Span
from .interface import Tracer
from . import mirror
from .mirror import TraceMirror
from . import otel
from .otel import OpenTelemetryTracer
from .otel import build_tracer
from . import recorder
from .recorder import NoOpTracer
from .recorder import RecordingTracer
from .recorder import SpanRecord

__all__ = [
    "interface",
    "mirror",
    "otel",
    "recorder",
    "build_tracer",
    "NoOpTracer",
    "OpenTelemetryTracer",
    "RecordingTracer",
    "Span",
    "SpanRecord",
    "TraceMirror",
    "Tracer",
]
