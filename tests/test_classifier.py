import os
from pathlib import Path

import pytest

from Tree_Digest.core.classifier import classify
from Tree_Digest.core.errors import EnumerationError, PathNotFound
from Tree_Digest.core.models import NodeKind


def test_classify_regular_file(tmp_path: Path):
    f = tmp_path / "doc.md"
    f.write_text("hello")

    info = classify(f)

    assert info.kind is NodeKind.FILE
    assert info.size_bytes == 5
    assert info.name == "doc.md"


def test_classify_directory(tmp_path: Path):
    assert classify(tmp_path).kind is NodeKind.DIRECTORY


def test_classify_missing_path(tmp_path: Path):
    with pytest.raises(PathNotFound):
        classify(tmp_path / "nope")


def test_classify_does_not_follow_symlinks(tmp_path: Path):
    target = tmp_path / "real"
    target.mkdir()
    link = tmp_path / "link"
    os.symlink(target, link)

    info = classify(link)

    assert info.kind is NodeKind.OTHER
    assert info.is_symlink


def test_classify_dangling_symlink_is_other(tmp_path: Path):
    link = tmp_path / "dangling"
    os.symlink(tmp_path / "missing", link)

    assert classify(link).kind is NodeKind.OTHER


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs FIFOs")
def test_classify_fifo_is_other(tmp_path: Path):
    fifo = tmp_path / "pipe"
    os.mkfifo(fifo)

    info = classify(fifo)

    assert info.kind is NodeKind.OTHER
    assert not info.is_symlink


def test_classify_follows_symlink_when_asked(tmp_path: Path):
    target = tmp_path / "real"
    target.mkdir()
    link = tmp_path / "link"
    os.symlink(target, link)

    info = classify(link, follow_symlinks=True)

    assert info.kind is NodeKind.DIRECTORY
    assert info.path == link


def test_classify_followed_dangling_symlink_is_missing(tmp_path: Path):
    link = tmp_path / "dangling"
    os.symlink(tmp_path / "missing", link)

    with pytest.raises(PathNotFound):
        classify(link, follow_symlinks=True)


def test_classify_rejects_embedded_nul():
    with pytest.raises(EnumerationError) as info:
        classify(Path("bad\x00name"))

    assert isinstance(info.value.__cause__, ValueError)
