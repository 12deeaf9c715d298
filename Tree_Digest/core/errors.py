from pathlib import Path


class DigestError(Exception):
    """
    Base class for failures contained at a node boundary.
    """

    def __init__(self, path: Path, message: str):
        super().__init__(f"{message}: {path}")
        self.path = path
        self.message = message


class PathNotFound(DigestError):
    def __init__(self, path: Path):
        super().__init__(path, "path does not exist")


class UnsupportedKind(DigestError):
    """Neither a regular file nor a directory (sockets, devices, symlinks)."""

    def __init__(self, path: Path):
        super().__init__(path, "unsupported file kind")


class ReadError(DigestError):
    def __init__(self, path: Path, message: str = "unable to read file"):
        super().__init__(path, message)


class EnumerationError(DigestError):
    def __init__(self, path: Path, message: str = "unable to list directory"):
        super().__init__(path, message)
