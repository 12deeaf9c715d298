from pathlib import Path

from Tree_Digest.core.errors import ReadError
from Tree_Digest.core.models import ChildEntry, DirectoryListing, NodeInfo, NodeKind, Outcome


def test_node_info_name(tmp_path: Path):
    info = NodeInfo(path=tmp_path / "example.TXT", kind=NodeKind.FILE, size_bytes=5)

    assert info.name == "example.TXT"
    assert info.is_symlink is False


def test_directory_listing_defaults(tmp_path: Path):
    listing = DirectoryListing(path=tmp_path)

    assert listing.entries == []
    assert listing.symlinks_skipped == 0
    assert listing.errors == []


def test_outcome_success_and_failure(tmp_path: Path):
    ok = Outcome.success(b"\x00" * 32, NodeKind.FILE)
    assert ok.ok
    assert ok.error is None

    err = ReadError(tmp_path / "x")
    failed = Outcome.failure(err, NodeKind.FILE)
    assert not failed.ok
    assert failed.value is None
    assert failed.error is err


def test_child_entries_are_hashable():
    a = ChildEntry("a", 1)
    assert {a, ChildEntry("a", 1)} == {a}
