import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, TextIO

from Tree_Digest.digest.engine import DigestEngine
from Tree_Digest.core.errors import PathNotFound
from Tree_Digest.core.models import Outcome
from Tree_Digest.tracing.interface import Tracer


logger = logging.getLogger(__name__)

PROMPT = "enter a file or directory (ctrl+d to quit): "


@dataclass
class RequestResult:
    path: Path
    outcome: Outcome
    rendered: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome.ok


# ============================================================
# One request
# ============================================================

def handle_request(
    engine: DigestEngine,
    path: Path,
    *,
    environment: str | None = None,
) -> RequestResult:
    """
    Digest one requested path under its own root span.

    The root span is tagged with the rendered value, or with an error
    when the path is missing or the node at the path itself fails.
    """
    path = Path(path)
    mirror = engine.mirror
    primitive = engine.primitive

    with mirror.open_request(path, environment) as root:
        outcome = engine.visit(path, root.context())

        if outcome.ok:
            rendered = primitive.render(outcome.value)
            root.set_tag(primitive.tag_key, rendered)
            return RequestResult(path=path, outcome=outcome, rendered=rendered)

        if isinstance(outcome.error, PathNotFound):
            root.set_error("The file does not exist.")
        else:
            root.set_error(f"Unable to calculate {primitive.name} hash.")
        return RequestResult(path=path, outcome=outcome)


def report(result: RequestResult, algorithm: str, out: TextIO, err: TextIO) -> None:
    if result.ok:
        print(f"{algorithm}({result.path}): {result.rendered}", file=out, flush=True)
    elif isinstance(result.outcome.error, PathNotFound):
        print(f"The file {result.path} does not exist.", file=err, flush=True)
    else:
        print(f"Unable to calculate the {algorithm} hash of {result.path}.", file=err, flush=True)


# ============================================================
# Sessions
# ============================================================

def run_paths(
    engine: DigestEngine,
    paths: Iterable[Path],
    *,
    environment: str | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """
    Process each path in turn. Returns the number of failed requests.
    """
    out = out or sys.stdout
    err = err or sys.stderr

    failures = 0
    for path in paths:
        result = handle_request(engine, Path(path), environment=environment)
        report(result, engine.primitive.name, out, err)
        if not result.ok:
            failures += 1
    return failures


def run_interactive(
    engine: DigestEngine,
    *,
    environment: str | None = None,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """
    Prompt for one path per line until end of input.

    Blank lines are ignored. A failed request never stops the session.
    Returns the number of failed requests.
    """
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    err = err or sys.stderr

    failures = 0
    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break

        raw = line.rstrip("\r\n")
        if not raw.strip():
            continue

        result = handle_request(engine, Path(raw), environment=environment)
        report(result, engine.primitive.name, out, err)
        if not result.ok:
            failures += 1

    print("", file=out)
    return failures


def close_tracer(tracer: Tracer) -> None:
    try:
        tracer.shutdown()
    except Exception:
        logger.exception("Tracer shutdown failed")
