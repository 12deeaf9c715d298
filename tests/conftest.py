from pathlib import Path

import pytest

from Tree_Digest.tracing.recorder import RecordingTracer


def write_tree(root: Path, layout: dict) -> Path:
    """
    Create files and directories under root from a nested dict:
    str/bytes values are file contents, dict values are subdirectories.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, content in layout.items():
        target = root / name
        if isinstance(content, dict):
            write_tree(target, content)
        elif isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def tracer():
    return RecordingTracer()


@pytest.fixture
def make_tree(tmp_path: Path):
    def _make(layout: dict, name: str = "tree") -> Path:
        return write_tree(tmp_path / name, layout)

    return _make


@pytest.hookimpl(tryfirst=True)
def pytest_sessionfinish(session, exitstatus):
    # pytest removes old tmp_path trees with a recursive shutil.rmtree; the
    # deep-tree test leaves directories nested deeper than the default
    # recursion limit allows. Raise it only once all tests have run.
    import sys

    sys.setrecursionlimit(max(sys.getrecursionlimit(), 10000))
