import logging
from typing import Any, Dict, Optional

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import Status, StatusCode

from Tree_Digest.tracing.interface import Span, TagValue, Tracer
from Tree_Digest.tracing.recorder import NoOpTracer


logger = logging.getLogger(__name__)

INSTRUMENTATION_NAME = "Tree_Digest"
EXPORTERS = ("none", "console", "memory")


# ============================================================
# Adapter
# ============================================================

class OpenTelemetrySpan(Span):
    def __init__(self, span: trace.Span):
        self._span = span

    @property
    def otel_span(self) -> trace.Span:
        return self._span

    def set_tag(self, key: str, value: TagValue) -> None:
        self._span.set_attribute(key, value)

    def set_error(self, message: str) -> None:
        self._span.set_attribute("error", message)
        self._span.set_status(Status(StatusCode.ERROR, message))

    def context(self) -> Context:
        return trace.set_span_in_context(self._span)

    def finish(self) -> None:
        self._span.end()


class OpenTelemetryTracer(Tracer):
    """
    Wraps an OpenTelemetry tracer.

    Parent contexts are OpenTelemetry Context objects. A span started with
    no parent begins a new trace instead of attaching to whatever span
    happens to be current.
    """

    def __init__(
        self,
        tracer: trace.Tracer,
        *,
        provider: Optional[TracerProvider] = None,
        exporter: Any = None,
    ):
        self._tracer = tracer
        self.provider = provider
        self.exporter = exporter

    def start_span(self, operation_name: str, parent: Any = None) -> OpenTelemetrySpan:
        context = parent if parent is not None else Context()
        return OpenTelemetrySpan(self._tracer.start_span(operation_name, context=context))

    def shutdown(self) -> None:
        if self.provider is not None:
            self.provider.shutdown()


# ============================================================
# Construction from settings
# ============================================================

def build_tracer(settings: Dict[str, Any]) -> Tracer:
    """
    Build the tracer described by the "tracing" settings section.

    The provider is kept local to the returned tracer; global OpenTelemetry
    state is never touched.
    """
    tracing = settings.get("tracing", {})
    exporter_name = str(tracing.get("exporter", "none")).lower()

    if exporter_name not in EXPORTERS:
        raise ValueError(
            f"Unknown tracing exporter '{exporter_name}' (expected one of: {', '.join(EXPORTERS)})"
        )

    if exporter_name == "none":
        return NoOpTracer()

    resource = Resource.create(
        {
            "service.name": tracing.get("service_name", "tree-digest"),
            "deployment.environment": tracing.get("environment", "production"),
        }
    )
    provider = TracerProvider(resource=resource)

    if exporter_name == "console":
        exporter = ConsoleSpanExporter()
    else:
        exporter = InMemorySpanExporter()

    provider.add_span_processor(SimpleSpanProcessor(exporter))
    logger.debug("Tracing with %s exporter", exporter_name)

    return OpenTelemetryTracer(
        provider.get_tracer(INSTRUMENTATION_NAME),
        provider=provider,
        exporter=exporter,
    )
