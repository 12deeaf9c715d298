import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, List

from Tree_Digest.core.classifier import classify
from Tree_Digest.core.errors import DigestError, UnsupportedKind
from Tree_Digest.core.models import ChildEntry, NodeInfo, NodeKind, Outcome
from Tree_Digest.core.scanner import list_directory
from Tree_Digest.digest.aggregate import combine
from Tree_Digest.digest.leaf import valuate
from Tree_Digest.digest.primitives import Primitive, get_primitive
from Tree_Digest.tracing.interface import Span, Tracer
from Tree_Digest.tracing.mirror import TraceMirror


logger = logging.getLogger(__name__)


@dataclass
class _DirectoryFrame:
    """A directory whose span is open and whose entries are still being visited."""
    info: NodeInfo
    span: Span
    pending: Iterator[Path]
    children: List[ChildEntry] = field(default_factory=list)


class DigestEngine:
    """
    Depth-first driver: classify, valuate or expand, aggregate, tag.

    Every visited file or directory gets exactly one span, parented by
    the span of the directory it was found in. Failures are contained at
    the node where they happen:
    - a failed child is left out of its parent's aggregate
    - the parent still succeeds and reports a value
    - only the caller of visit sees a root failure

    Open directories live on an explicit stack, so tree depth is not
    bounded by the interpreter's recursion limit.
    """

    def __init__(self, tracer: Tracer, primitive: Primitive | str | None = None):
        if primitive is None or isinstance(primitive, str):
            primitive = get_primitive(primitive)
        self.primitive = primitive
        self.tracer = tracer
        self.mirror = TraceMirror(tracer, primitive)

    def visit(self, path: Path, parent_context: Any = None) -> Outcome:
        """
        Digest the node at path, opening its span under parent_context.

        A symlink given here is followed; symlinks met inside directories
        never are. Missing or unsupported nodes fail without a span.
        """
        path = Path(path)
        try:
            info = classify(path, follow_symlinks=True)
        except DigestError as exc:
            logger.debug("Excluding %s: %s", path, exc)
            return Outcome.failure(exc)

        if info.kind is NodeKind.FILE:
            return self._visit_file(info, parent_context)
        if info.kind is NodeKind.DIRECTORY:
            return self._walk(info, parent_context)

        logger.debug("Excluding unsupported node %s", path)
        return Outcome.failure(UnsupportedKind(path), NodeKind.OTHER)

    # ----------------------------
    # Leaves
    # ----------------------------

    def _visit_file(self, info: NodeInfo, parent_context: Any) -> Outcome:
        with self.mirror.open_node(info, parent_context) as span:
            try:
                value = valuate(info.path, self.primitive)
            except DigestError as exc:
                logger.warning("Excluding %s: %s", info.path, exc)
                self.mirror.tag_error(span, exc)
                return Outcome.failure(exc, NodeKind.FILE)

            self.mirror.tag_value(span, value)
            return Outcome.success(value, NodeKind.FILE)

    # ----------------------------
    # Directories
    # ----------------------------

    def _open_directory(self, info: NodeInfo, parent_context: Any) -> _DirectoryFrame | Outcome:
        span = self.mirror.open_node(info, parent_context)
        try:
            listing = list_directory(info.path)
        except DigestError as exc:
            logger.warning("Excluding %s: %s", info.path, exc)
            self.mirror.tag_error(span, exc)
            span.finish()
            return Outcome.failure(exc, NodeKind.DIRECTORY)

        self.mirror.tag_listing(span, listing)
        return _DirectoryFrame(info=info, span=span, pending=iter(listing.entries))

    def _close_directory(self, frame: _DirectoryFrame) -> Outcome:
        value = combine(frame.children, self.primitive)
        self.mirror.tag_included(frame.span, len(frame.children))
        self.mirror.tag_value(frame.span, value)
        frame.span.finish()
        return Outcome.success(value, NodeKind.DIRECTORY, children_included=len(frame.children))

    def _walk(self, info: NodeInfo, parent_context: Any) -> Outcome:
        opened = self._open_directory(info, parent_context)
        if isinstance(opened, Outcome):
            return opened

        stack: List[_DirectoryFrame] = [opened]
        try:
            while True:
                frame = stack[-1]
                child_path = next(frame.pending, None)

                if child_path is None:
                    stack.pop()
                    outcome = self._close_directory(frame)
                    if not stack:
                        return outcome
                    stack[-1].children.append(ChildEntry(name=frame.info.name, value=outcome.value))
                    continue

                try:
                    child = classify(child_path)
                except DigestError as exc:
                    logger.debug("Excluding %s: %s", child_path, exc)
                    continue

                if child.kind is NodeKind.FILE:
                    outcome = self._visit_file(child, frame.span.context())
                    if outcome.ok:
                        frame.children.append(ChildEntry(name=child.name, value=outcome.value))
                elif child.kind is NodeKind.DIRECTORY:
                    opened = self._open_directory(child, frame.span.context())
                    if isinstance(opened, _DirectoryFrame):
                        stack.append(opened)
                else:
                    logger.debug("Excluding unsupported node %s", child_path)
        finally:
            # Unwinding on an unexpected error: close what is still open, innermost first.
            while stack:
                stack.pop().span.finish()


def digest_tree(
    path: Path,
    tracer: Tracer,
    primitive: Primitive | str | None = None,
    parent_context: Any = None,
) -> Outcome:
    """Convenience wrapper: one engine, one visit."""
    return DigestEngine(tracer, primitive).visit(path, parent_context)
