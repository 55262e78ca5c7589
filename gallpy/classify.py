"""Decide what a filesystem path is: a directory, a known media kind, or unknown."""

from enum import Enum
from pathlib import Path

from .config import MediaKind


class PathType(Enum):
    DIRECTORY = "directory"
    IMAGE = "image"
    MOVIE = "movie"
    UNKNOWN = "unknown"


_KIND_TO_TYPE = {
    MediaKind.IMAGE: PathType.IMAGE,
    MediaKind.MOVIE: PathType.MOVIE,
}


def media_kind(path: Path):
    """Return the MediaKind whose extension table contains path's suffix, or None."""
    ext = path.suffix.lower()
    for kind in MediaKind:
        if ext in kind.extensions:
            return kind
    return None


def classify(path: Path) -> PathType:
    path = Path(path)
    if path.is_dir():
        return PathType.DIRECTORY
    kind = media_kind(path)
    if kind is None:
        return PathType.UNKNOWN
    return _KIND_TO_TYPE[kind]
