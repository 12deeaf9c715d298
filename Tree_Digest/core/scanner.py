import logging
import os
from pathlib import Path

from Tree_Digest.core.errors import EnumerationError, PathNotFound
from Tree_Digest.core.models import DirectoryListing


logger = logging.getLogger(__name__)


# ============================================================
# Directory enumeration
# ============================================================

def list_directory(directory: Path) -> DirectoryListing:
    """
    Enumerate the immediate children of a directory.

    - Symlinked entries are skipped and counted, never dereferenced
    - An entry that cannot be inspected is skipped, enumeration continues
    - A directory that vanished raises PathNotFound
    - A directory that cannot be opened raises EnumerationError

    Entries come back in whatever order the filesystem reports them;
    callers must not depend on it.
    """
    directory = Path(directory)
    listing = DirectoryListing(path=directory)

    try:
        it = os.scandir(directory)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise PathNotFound(directory) from exc
    except OSError as exc:
        raise EnumerationError(directory) from exc

    try:
        with it:
            for entry in it:
                try:
                    is_link = entry.is_symlink()
                except OSError as exc:
                    logger.warning("Skipping unreadable entry %s: %s", entry.path, exc)
                    listing.errors.append(
                        EnumerationError(Path(entry.path), "unable to inspect entry")
                    )
                    continue

                if is_link:
                    logger.debug("Skipping symlink %s", entry.path)
                    listing.symlinks_skipped += 1
                    continue

                listing.entries.append(Path(entry.path))
    except OSError as exc:
        raise EnumerationError(directory, "directory listing interrupted") from exc

    return listing
