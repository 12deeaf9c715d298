import itertools
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from Tree_Digest.tracing.interface import Span, TagValue, Tracer


# ============================================================
# In-memory recording tracer
# ============================================================

@dataclass
class SpanRecord:
    """
    What a recorded span looked like: name, tags, and the id of its parent.
    """
    span_id: int
    name: str
    parent_id: Optional[int] = None
    tags: Dict[str, TagValue] = field(default_factory=dict)
    finished: bool = False


@dataclass(frozen=True)
class RecordedContext:
    span_id: int


class RecordingSpan(Span):
    def __init__(self, tracer: "RecordingTracer", record: SpanRecord):
        self._tracer = tracer
        self.record = record

    def set_tag(self, key: str, value: TagValue) -> None:
        if self.record.finished:
            raise RuntimeError(f"span {self.record.name!r} already finished")
        self.record.tags[key] = value

    def context(self) -> RecordedContext:
        return RecordedContext(self.record.span_id)

    def finish(self) -> None:
        if not self.record.finished:
            self.record.finished = True
            self._tracer._on_finish(self.record)


class RecordingTracer(Tracer):
    """
    Keeps every span in memory for later inspection.

    Span creation is guarded by a lock so sibling spans may be opened
    from several threads under one parent.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self.spans: List[SpanRecord] = []
        self.finish_order: List[int] = []

    def start_span(self, operation_name: str, parent: Any = None) -> RecordingSpan:
        if parent is not None and not isinstance(parent, RecordedContext):
            raise TypeError(f"foreign trace context: {parent!r}")
        with self._lock:
            record = SpanRecord(
                span_id=next(self._ids),
                name=operation_name,
                parent_id=parent.span_id if parent is not None else None,
            )
            self.spans.append(record)
        return RecordingSpan(self, record)

    def _on_finish(self, record: SpanRecord) -> None:
        with self._lock:
            self.finish_order.append(record.span_id)

    # ----------------------------
    # Inspection helpers
    # ----------------------------

    def get(self, span_id: int) -> SpanRecord:
        for record in self.spans:
            if record.span_id == span_id:
                return record
        raise KeyError(span_id)

    def children_of(self, span_id: int) -> List[SpanRecord]:
        return [r for r in self.spans if r.parent_id == span_id]

    def by_path(self, path) -> SpanRecord:
        matches = [r for r in self.spans if r.tags.get("path") == str(path)]
        if len(matches) != 1:
            raise LookupError(f"expected one span for {path}, found {len(matches)}")
        return matches[0]

    def named(self, name: str) -> List[SpanRecord]:
        return [r for r in self.spans if r.name == name]


# ============================================================
# No-op tracer
# ============================================================

class NoOpSpan(Span):
    def set_tag(self, key: str, value: TagValue) -> None:
        pass

    def context(self) -> None:
        return None

    def finish(self) -> None:
        pass


class NoOpTracer(Tracer):
    def start_span(self, operation_name: str, parent: Any = None) -> NoOpSpan:
        return NoOpSpan()
