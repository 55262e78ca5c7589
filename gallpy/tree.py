"""
The gallery tree: directories become Gallery nodes, media files become
Image/Movie leaves.

The tree is scanned once and treated as read-only afterwards. Aggregates
(flattened lists, recursive counts, propagated thumbnails, ancestry) are
computed on first access and cached for the node's lifetime, so nodes must
not be mutated once anything has read them.
"""

import weakref
from functools import cached_property
from pathlib import Path

from .classify import PathType, classify
from .config import DERIVATIVE_DIRS, INDEX_FILENAME, DerivationKind, MediaKind
from .derivation import Derivation
from .errors import ScanError
from .log import get_logger


def sort_key(node) -> str:
    return str(node.path).lower()


def link_siblings(items: list):
    """Chain each item to its sorted neighbours. Ends are left as None."""
    for i, item in enumerate(items):
        item.previous = items[i - 1] if i > 0 else None
        item.next = items[i + 1] if i + 1 < len(items) else None


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

class GalleryPath:
    """Any path within a gallery: images, movies and directories."""

    def __init__(self, parent, path):
        # Children only point back at their parent; the parent owns them.
        self._parent = weakref.ref(parent) if parent is not None else None
        self.path = Path(path)
        self._ancestors = {}

    @property
    def parent(self):
        return self._parent() if self._parent is not None else None

    @cached_property
    def title(self) -> str:
        name = self.path.name
        if name in ("", ".", ".."):
            name = self.path.resolve().name
        return name

    def ancestors(self, stop_at=None) -> list:
        """Galleries above this node, outermost first.

        When stop_at is given, the node at that path is treated as the top
        of the chain: it has no ancestors of its own.
        """
        key = None if stop_at is None else str(Path(stop_at))
        if key not in self._ancestors:
            parent = self.parent
            if key is not None and str(self.path) == key:
                chain = []
            elif parent is not None:
                chain = parent.ancestors(stop_at) + [parent]
            else:
                chain = []
            self._ancestors[key] = chain
        return self._ancestors[key]

    def generations(self, stop_at=None) -> list:
        return self.ancestors(stop_at) + [self]

    def __repr__(self):
        return f"<{type(self).__name__} {self.path}>"


class GalleryFile(GalleryPath):
    """A media file within a gallery."""

    kind: MediaKind = None

    def __init__(self, parent, path):
        super().__init__(parent, path)
        self.previous = None
        self.next = None
        self._derivations = {}

    def derivation(self, kind: DerivationKind) -> Derivation:
        if kind not in self._derivations:
            self._derivations[kind] = Derivation(self.path, kind, self.kind.spec(kind))
        return self._derivations[kind]

    @property
    def thumbnail(self) -> Derivation:
        return self.derivation(DerivationKind.THUMBNAIL)

    @property
    def medium(self) -> Derivation:
        return self.derivation(DerivationKind.MEDIUM)

    def walk(self):
        yield self


class Image(GalleryFile):
    kind = MediaKind.IMAGE


class Movie(GalleryFile):
    kind = MediaKind.MOVIE


ITEM_TYPES = {
    PathType.IMAGE: Image,
    PathType.MOVIE: Movie,
}


class Gallery(GalleryPath):
    """A directory: holds child galleries, images and movies, each sorted by path."""

    def __init__(self, parent, path):
        super().__init__(parent, path)
        self.galleries: list[Gallery] = []
        self.images: list[Image] = []
        self.movies: list[Movie] = []
        self.scan_errors: list[ScanError] = []

    def finish(self):
        """Sort the child lists and link siblings. Called once, after scanning."""
        self.galleries.sort(key=sort_key)
        self.images.sort(key=sort_key)
        self.movies.sort(key=sort_key)
        link_siblings(self.images)
        link_siblings(self.movies)

    @property
    def has_children(self) -> bool:
        return bool(self.galleries or self.images or self.movies)

    @property
    def index(self) -> Path:
        return self.path / INDEX_FILENAME

    def _flatten(self, attr: str) -> list:
        result = list(getattr(self, attr))
        for gallery in self.galleries:
            result.extend(getattr(gallery, "all_" + attr))
        return result

    def _count(self, attr: str) -> int:
        return len(getattr(self, attr)) + sum(
            getattr(gallery, f"sub_{attr}_count") for gallery in self.galleries
        )

    @cached_property
    def all_galleries(self) -> list:
        return self._flatten("galleries")

    @cached_property
    def all_images(self) -> list:
        return self._flatten("images")

    @cached_property
    def all_movies(self) -> list:
        return self._flatten("movies")

    @cached_property
    def sub_galleries_count(self) -> int:
        return self._count("galleries")

    @cached_property
    def sub_images_count(self) -> int:
        return self._count("images")

    @cached_property
    def sub_movies_count(self) -> int:
        return self._count("movies")

    @cached_property
    def thumbnail(self):
        """The first image's thumbnail, searching own images, then children in order."""
        if self.images:
            return self.images[0].thumbnail
        for gallery in self.galleries:
            if gallery.thumbnail is not None:
                return gallery.thumbnail
        return None

    def walk(self):
        """Pre-order: self, then child galleries, images and movies."""
        yield self
        for gallery in self.galleries:
            yield from gallery.walk()
        for node in self.images + self.movies:
            yield from node.walk()


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------

class Scanner:
    """Builds a Gallery tree from the filesystem.

    An unreadable root raises ScanError. An unreadable subdirectory is
    logged, left out of its parent, and recorded in the root's scan_errors.
    """

    def __init__(self, logger=None):
        self.logger = get_logger(logger)
        self.errors: list[ScanError] = []

    def scan(self, path) -> Gallery:
        root = self._scan(None, Path(path), frozenset())
        root.scan_errors = self.errors
        return root

    def _scan(self, parent, path: Path, seen: frozenset) -> Gallery:
        try:
            children = list(path.iterdir())
        except OSError as exc:
            raise ScanError(path, exc) from exc

        seen = seen | {path.resolve()}
        gallery = Gallery(parent, path)
        directories, files = [], []
        for child in children:
            path_type = classify(child)
            if path_type is PathType.DIRECTORY:
                directories.append(child)
            elif path_type is PathType.UNKNOWN:
                self.logger.debug("Don't know how to handle %s", child)
            else:
                files.append((child, path_type))

        for child in directories:
            if child.name in DERIVATIVE_DIRS:
                continue
            if child.is_symlink() and child.resolve() in seen:
                self.logger.warning("Skipping %s: symlink loops back to %s", child, child.resolve())
                continue
            self.logger.debug("Directory! %s", child)
            try:
                gallery.galleries.append(self._scan(gallery, child, seen))
            except ScanError as exc:
                self.logger.error("%s", exc)
                self.errors.append(exc)

        for child, path_type in files:
            self.logger.debug("%s! %s", path_type.name.title(), child)
            item = ITEM_TYPES[path_type](gallery, child)
            if path_type is PathType.IMAGE:
                gallery.images.append(item)
            else:
                gallery.movies.append(item)

        gallery.finish()
        return gallery


def scan_gallery(path, logger=None) -> Gallery:
    return Scanner(logger).scan(path)
