import logging
import os
import stat
from pathlib import Path

from Tree_Digest.core.errors import EnumerationError, PathNotFound
from Tree_Digest.core.models import NodeInfo, NodeKind


logger = logging.getLogger(__name__)


def classify(path: Path, *, follow_symlinks: bool = False) -> NodeInfo:
    """
    Classify a path with a single stat call.

    - By default symbolic links are not followed and classify as OTHER
    - A path that vanished (or never existed) raises PathNotFound
    - A path the OS rejects outright (e.g. an embedded NUL) raises EnumerationError
    - Any other stat failure raises EnumerationError
    """
    path = Path(path)
    try:
        st = os.stat(path) if follow_symlinks else os.lstat(path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise PathNotFound(path) from exc
    except ValueError as exc:
        raise EnumerationError(path, "invalid path") from exc
    except OSError as exc:
        raise EnumerationError(path, "unable to stat path") from exc

    mode = st.st_mode
    if stat.S_ISLNK(mode):
        logger.debug("Not following symlink %s", path)
        return NodeInfo(path=path, kind=NodeKind.OTHER, is_symlink=True)
    if stat.S_ISDIR(mode):
        return NodeInfo(path=path, kind=NodeKind.DIRECTORY)
    if stat.S_ISREG(mode):
        return NodeInfo(path=path, kind=NodeKind.FILE, size_bytes=st.st_size)

    return NodeInfo(path=path, kind=NodeKind.OTHER)
