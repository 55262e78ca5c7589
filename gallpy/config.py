"""Constants, the media-kind capability table and per-run build settings."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

DEFAULT_BASE_URL = "/photos"
ROWSIZE = 5                 # thumbnails per table row
INDEX_FILENAME = "index.html"
STYLESHEET_FILENAME = "style.css"
DEFAULT_RESIZER = "pillow"

THUMBNAIL_GEOMETRY = "133x133"
MEDIUM_GEOMETRY = "800x800"


class ResizeMode(Enum):
    SCALE = "scale"
    RESIZE = "resize"
    CROP_RESIZE = "crop_resize"


class DerivationKind(Enum):
    THUMBNAIL = "thumbnail"
    MEDIUM = "medium"


@dataclass(frozen=True)
class DerivationSpec:
    """How to make one derived artifact from a source file."""
    token: str
    geometry: str
    mode: ResizeMode
    has_image: bool
    has_html: bool


@dataclass(frozen=True)
class KindSpec:
    extensions: frozenset
    derivations: MappingProxyType


class MediaKind(Enum):
    """Gallery item variants, each carrying its extensions and derivation table."""

    IMAGE = KindSpec(
        extensions=frozenset({".jpg", ".gif"}),
        derivations=MappingProxyType({
            DerivationKind.THUMBNAIL: DerivationSpec("tn", THUMBNAIL_GEOMETRY, ResizeMode.SCALE, True, False),
            DerivationKind.MEDIUM: DerivationSpec("med", MEDIUM_GEOMETRY, ResizeMode.RESIZE, True, True),
        }),
    )
    MOVIE = KindSpec(
        extensions=frozenset({".avi", ".mov"}),
        derivations=MappingProxyType({
            DerivationKind.THUMBNAIL: DerivationSpec("tn", THUMBNAIL_GEOMETRY, ResizeMode.SCALE, False, False),
            DerivationKind.MEDIUM: DerivationSpec("med", MEDIUM_GEOMETRY, ResizeMode.RESIZE, False, False),
        }),
    )

    @property
    def extensions(self) -> frozenset:
        return self.value.extensions

    def spec(self, kind: DerivationKind) -> DerivationSpec:
        return self.value.derivations[kind]


# Directories holding generated derivatives; never scanned as content.
DERIVATIVE_DIRS = frozenset(
    spec.token
    for media in MediaKind
    for spec in media.value.derivations.values()
)


@dataclass
class BuildSettings:
    """Options for one gallery build, usually filled in from the command line."""
    base_url: str = DEFAULT_BASE_URL
    rowsize: int = ROWSIZE
    resizer: str = DEFAULT_RESIZER
    jobs: int = 1
    keep_going: bool = True
    write_stylesheet: bool = True
