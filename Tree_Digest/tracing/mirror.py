from pathlib import Path
from typing import Any

from Tree_Digest.core.models import DirectoryListing, NodeInfo, NodeKind, Value
from Tree_Digest.tracing.interface import Span, Tracer


class TraceMirror:
    """
    Opens one span per visited node and tags it with node metadata.

    Metadata known on entry is set immediately, so an interrupted request
    still carries useful tags.
    """

    def __init__(self, tracer: Tracer, primitive):
        self.tracer = tracer
        self.primitive = primitive

    def operation_name(self, kind: str) -> str:
        return f"{self.primitive.name}.{kind}"

    # ----------------------------
    # Node spans
    # ----------------------------

    def open_node(self, info: NodeInfo, parent: Any) -> Span:
        if info.kind is NodeKind.FILE:
            span = self.tracer.start_span(self.operation_name("file"), parent)
            span.set_tag("path", str(info.path))
            span.set_tag("file_name", info.name)
            span.set_tag("file_size_bytes", info.size_bytes)
            return span

        if info.kind is NodeKind.DIRECTORY:
            span = self.tracer.start_span(self.operation_name("directory"), parent)
            span.set_tag("path", str(info.path))
            span.set_tag("directory_name", info.name)
            return span

        raise ValueError(f"no span for {info.kind.value} node {info.path}")

    def tag_listing(self, span: Span, listing: DirectoryListing) -> None:
        span.set_tag("number_of_entries", len(listing.entries))
        span.set_tag("number_of_symlinks_skipped", listing.symlinks_skipped)
        span.set_tag("number_of_entries_skipped", len(listing.errors))

    def tag_included(self, span: Span, count: int) -> None:
        span.set_tag("number_of_children_included", count)

    def tag_value(self, span: Span, value: Value) -> None:
        span.set_tag(self.primitive.tag_key, self.primitive.render(value))

    def tag_error(self, span: Span, error: Exception) -> None:
        span.set_error(str(error))

    # ----------------------------
    # Request span
    # ----------------------------

    def open_request(self, path: Path, environment: str | None = None) -> Span:
        span = self.tracer.start_span(self.operation_name("request"))
        if environment:
            span.set_tag("env", environment)
        span.set_tag("path", str(path))
        span.set_tag("algorithm", self.primitive.name)
        return span
