"""
Build a gallery in four passes over the tree:

1. indices           - every gallery's index.html, always rewritten
2. index thumbnails  - each gallery's propagated thumbnail, so the top
                       pages have images before the per-item passes finish
3. thumbnails        - every item's thumbnail derivation
4. mediums           - every item's medium derivation

Resized images are only produced when missing from disk; HTML pages are
always rewritten so navigation links never go stale.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import BuildSettings, DerivationKind
from .errors import ResizeError
from .log import get_logger
from .render import Renderer
from .resize import get_resizer
from .tree import Gallery, GalleryFile, scan_gallery
from .urls import UrlResolver


@dataclass
class BuildReport:
    indices: int = 0
    html: int = 0
    resized: int = 0
    skipped: int = 0
    failed: list = field(default_factory=list)       # (path, ResizeError)
    scan_errors: list = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed and not self.scan_errors

    def summary(self) -> str:
        return (f"{self.indices} indices, {self.html} pages, {self.resized} resized, "
                f"{self.skipped} up to date, {len(self.failed)} failed")


def write_file(path: Path, content: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class Builder:
    def __init__(self, gallery: Gallery, renderer: Renderer, resizer, logger=None,
                 jobs: int = 1, keep_going: bool = True, write_stylesheet: bool = True):
        self.gallery = gallery
        self.renderer = renderer
        self.resizer = resizer
        self.logger = get_logger(logger)
        self.jobs = max(1, jobs)
        self.keep_going = keep_going
        self.write_stylesheet = write_stylesheet
        self.report = BuildReport(scan_errors=list(gallery.scan_errors))
        self._lock = threading.Lock()
        self._failed = set()

    def build(self) -> BuildReport:
        if self.write_stylesheet:
            self.renderer.write_stylesheet()
        self.indices()
        self.index_thumbnails()
        self.thumbnails()
        self.mediums()
        return self.report

    def galleries(self):
        return (node for node in self.gallery.walk() if isinstance(node, Gallery))

    def items(self):
        return (node for node in self.gallery.walk() if isinstance(node, GalleryFile))

    # -- phases --

    def indices(self):
        self.logger.info("Indices")
        for gallery in self.galleries():
            self.logger.debug("Gallery: %s", gallery.path)
            write_file(gallery.index, self.renderer.render("gallery", gallery=gallery))
            self.report.indices += 1

    def index_thumbnails(self):
        self.logger.info("Index Thumbnails")
        for gallery in self.galleries():
            if gallery.thumbnail is not None:
                self.ensure_image(gallery.thumbnail)

    def thumbnails(self):
        self.make_derivations(DerivationKind.THUMBNAIL)

    def mediums(self):
        self.make_derivations(DerivationKind.MEDIUM)

    def make_derivations(self, kind: DerivationKind):
        self.logger.info("%s: html", kind.value)
        pending = []
        for item in self.items():
            derivation = item.derivation(kind)
            if derivation.has_html:
                self.write_html(item, derivation)
            else:
                self.logger.debug("Skipping HTML(%s) for: %s", kind.value, item.path)
            if derivation.has_image:
                pending.append(derivation)

        self.logger.info("%s: resizing", kind.value)
        if self.jobs > 1:
            # Every item has its own target path, so workers never share a file.
            with ThreadPoolExecutor(max_workers=self.jobs) as pool:
                list(pool.map(self.ensure_image, pending))
        else:
            for derivation in pending:
                self.ensure_image(derivation)

    # -- single artifacts --

    def write_html(self, item: GalleryFile, derivation):
        typename = item.kind.name.lower()
        self.logger.debug("Making HTML(%s) for: %s", derivation.kind.value, item.path)
        write_file(derivation.html, self.renderer.render(typename, **{typename: item}))
        self.report.html += 1

    def ensure_image(self, derivation) -> bool:
        """Resize the derivation's image unless it already exists. True if it was built.

        A target that failed earlier in this run is not tried again.
        """
        target = derivation.path
        with self._lock:
            if target in self._failed:
                return False
        if target.exists():
            with self._lock:
                self.report.skipped += 1
            return False

        target.parent.mkdir(parents=True, exist_ok=True)
        self.logger.info("Resizing: %s -> %s", derivation.source, target)
        width, height = derivation.size
        try:
            self.resizer(derivation.mode, derivation.source, target, width, height)
        except ResizeError as exc:
            if not self.keep_going:
                raise
            self.logger.error("%s", exc)
            with self._lock:
                self._failed.add(target)
                self.report.failed.append((target, exc))
            return False
        with self._lock:
            self.report.resized += 1
        return True


def build_gallery(path, settings: Optional[BuildSettings] = None, logger=None, resizer=None) -> BuildReport:
    """Scan path and build its gallery. Raises ScanError if path itself is unreadable."""
    settings = settings or BuildSettings()
    logger = get_logger(logger)
    gallery = scan_gallery(path, logger)
    urls = UrlResolver(gallery.path, settings.base_url)
    renderer = Renderer(gallery, urls, rowsize=settings.rowsize, logger=logger)
    if resizer is None:
        resizer = get_resizer(settings.resizer)
    builder = Builder(
        gallery, renderer, resizer, logger=logger,
        jobs=settings.jobs,
        keep_going=settings.keep_going,
        write_stylesheet=settings.write_stylesheet,
    )
    return builder.build()
