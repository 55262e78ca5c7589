"""Naming and placement of derived artifacts (resized images and their HTML pages)."""

from functools import cached_property
from typing import Optional
from pathlib import Path

from .config import DerivationKind, DerivationSpec, ResizeMode


def derive(source: Path, token: str, replacement_ext: Optional[str] = None) -> Path:
    """Map dir/base.ext to dir/<token>/base_<token>.ext (or the replacement extension)."""
    source = Path(source)
    ext = source.suffix if replacement_ext is None else replacement_ext
    return source.parent / token / f"{source.stem}_{token}{ext}"


def parse_geometry(geometry: str) -> tuple[int, int]:
    """Split a "WxH" geometry string into integers."""
    width, _, height = geometry.lower().partition("x")
    return int(width), int(height)


class Derivation:
    """One derived artifact of a source file.

    Knows where its image and HTML page live, but not whether they exist;
    the pipeline checks the disk at build time.
    """

    def __init__(self, source: Path, kind: DerivationKind, spec: DerivationSpec):
        self.source = Path(source)
        self.kind = kind
        self.token = spec.token
        self.geometry = spec.geometry
        self.mode: ResizeMode = spec.mode
        self.has_image = spec.has_image
        self.has_html = spec.has_html

    @cached_property
    def path(self) -> Path:
        return derive(self.source, self.token)

    @cached_property
    def html(self) -> Path:
        return derive(self.source, self.token, ".html")

    @property
    def size(self) -> tuple[int, int]:
        return parse_geometry(self.geometry)

    def __repr__(self):
        return f"<Derivation {self.kind.value} {self.path}>"

    def __str__(self):
        return str(self.path)
