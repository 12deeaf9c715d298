import logging
from pathlib import Path

from Tree_Digest.core.errors import ReadError
from Tree_Digest.core.models import Value


logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def valuate(path: Path, primitive) -> Value:
    """
    Stream a regular file's bytes through the primitive.

    Any open or read failure raises ReadError; a partially read file is
    never reported as a value. The handle is closed before returning.
    """
    path = Path(path)
    acc = primitive.new()
    try:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(CHUNK_SIZE)
                if not chunk:
                    break
                acc.update(chunk)
    except OSError as exc:
        logger.debug("Read failed for %s: %s", path, exc)
        raise ReadError(path, f"unable to read file ({exc.strerror or exc})") from exc

    return acc.value()
