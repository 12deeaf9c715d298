import threading
from pathlib import Path

import pytest

from Tree_Digest.core.errors import ReadError
from Tree_Digest.core.models import DirectoryListing, NodeInfo, NodeKind
from Tree_Digest.digest.primitives import Sha256
from Tree_Digest.tracing.mirror import TraceMirror
from Tree_Digest.tracing.recorder import NoOpSpan, NoOpTracer, RecordingTracer


def test_recording_tracer_links_parents(tracer):
    with tracer.start_span("parent") as parent:
        with tracer.start_span("child", parent.context()) as child:
            child.set_tag("k", "v")

    parent_rec, child_rec = tracer.spans
    assert parent_rec.parent_id is None
    assert child_rec.parent_id == parent_rec.span_id
    assert child_rec.tags == {"k": "v"}
    assert tracer.finish_order == [child_rec.span_id, parent_rec.span_id]
    assert tracer.children_of(parent_rec.span_id) == [child_rec]


def test_tagging_a_finished_span_fails(tracer):
    span = tracer.start_span("done")
    span.finish()

    with pytest.raises(RuntimeError):
        span.set_tag("late", 1)


def test_foreign_context_rejected(tracer):
    with pytest.raises(TypeError):
        tracer.start_span("x", parent=object())


def test_concurrent_span_creation_under_one_parent(tracer):
    root = tracer.start_span("root")
    ctx = root.context()

    def worker():
        for _ in range(50):
            tracer.start_span("child", ctx).finish()

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    children = tracer.children_of(root.record.span_id)
    assert len(children) == 200
    assert len({c.span_id for c in children}) == 200


def test_noop_tracer():
    span = NoOpTracer().start_span("anything")

    assert isinstance(span, NoOpSpan)
    span.set_tag("k", "v")
    span.set_error("boom")
    assert span.context() is None
    span.finish()


def test_mirror_tags_file_on_entry(tmp_path: Path, tracer):
    mirror = TraceMirror(tracer, Sha256())
    info = NodeInfo(path=tmp_path / "f.bin", kind=NodeKind.FILE, size_bytes=12)

    span = mirror.open_node(info, None)

    assert span.record.name == "sha256.file"
    assert span.record.tags == {
        "path": str(tmp_path / "f.bin"),
        "file_name": "f.bin",
        "file_size_bytes": 12,
    }


def test_mirror_directory_tags(tmp_path: Path, tracer):
    mirror = TraceMirror(tracer, Sha256())
    info = NodeInfo(path=tmp_path, kind=NodeKind.DIRECTORY)
    listing = DirectoryListing(path=tmp_path, entries=[tmp_path / "a"], symlinks_skipped=3)

    with mirror.open_node(info, None) as span:
        mirror.tag_listing(span, listing)
        mirror.tag_included(span, 1)
        mirror.tag_value(span, b"\x01\xab")

    tags = tracer.spans[0].tags
    assert tags["number_of_entries"] == 1
    assert tags["number_of_symlinks_skipped"] == 3
    assert tags["number_of_children_included"] == 1
    assert tags["sha256_hex"] == "01ab"


def test_mirror_error_tag(tmp_path: Path, tracer):
    mirror = TraceMirror(tracer, Sha256())
    info = NodeInfo(path=tmp_path / "f", kind=NodeKind.FILE)

    with mirror.open_node(info, None) as span:
        mirror.tag_error(span, ReadError(tmp_path / "f"))

    assert tracer.spans[0].tags["error"].startswith("unable to read file")


def test_mirror_refuses_other_nodes(tmp_path: Path, tracer):
    mirror = TraceMirror(tracer, Sha256())

    with pytest.raises(ValueError):
        mirror.open_node(NodeInfo(path=tmp_path, kind=NodeKind.OTHER), None)

    assert tracer.spans == []


def test_request_span_tags(tmp_path: Path):
    tracer = RecordingTracer()
    mirror = TraceMirror(tracer, Sha256())

    with mirror.open_request(tmp_path, "staging"):
        pass

    record = tracer.spans[0]
    assert record.name == "sha256.request"
    assert record.tags == {"env": "staging", "path": str(tmp_path), "algorithm": "sha256"}
