"""
Resize collaborators.

Each resizer is called as resizer(mode, source, target, width, height) and
either leaves a finished file at target or raises ResizeError. Output goes
to a temporary sibling first and is renamed into place on success, so a
file at the target path is always complete.
"""

import os
import shlex
import shutil
import subprocess
from pathlib import Path

from PIL import Image, ImageOps

from .config import ResizeMode
from .errors import ResizeError


def partial_path(target: Path) -> Path:
    """Scratch path next to target, keeping the suffix so the format is inferable."""
    return target.with_name(f".{target.stem}.partial{target.suffix}")


def _discard(path: Path):
    try:
        path.unlink()
    except FileNotFoundError:
        pass


class PillowResizer:
    """Resize in-process with Pillow."""

    name = "pillow"

    def __init__(self, quality: int = 85):
        self.quality = quality

    def describe(self, mode, source, target, width, height) -> str:
        return f"pillow {mode.value} {source} -> {target} {width}x{height}"

    def __call__(self, mode: ResizeMode, source: Path, target: Path, width: int, height: int):
        source, target = Path(source), Path(target)
        scratch = partial_path(target)
        try:
            with Image.open(source) as img:
                img = ImageOps.exif_transpose(img)
                if mode is ResizeMode.SCALE:
                    img.thumbnail((width, height), Image.BOX)
                elif mode is ResizeMode.RESIZE:
                    img.thumbnail((width, height), Image.LANCZOS)
                else:
                    img = ImageOps.fit(img, (width, height), Image.LANCZOS, centering=(0.5, 0.5))
                if scratch.suffix.lower() in (".jpg", ".jpeg") and img.mode not in ("RGB", "L"):
                    img = img.convert("RGB")
                img.save(scratch, quality=self.quality)
            os.replace(scratch, target)
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            _discard(scratch)
            raise ResizeError(self.describe(mode, source, target, width, height), cause=exc) from exc


class ImageMagickResizer:
    """Resize by running ImageMagick's convert."""

    name = "imagemagick"

    def __init__(self, binary: str = "convert"):
        self.binary = shutil.which(binary) or binary

    def arguments(self, mode: ResizeMode, width: int, height: int) -> list[str]:
        if mode is ResizeMode.SCALE:
            return ["-scale", f"{width}x{height}>"]
        if mode is ResizeMode.RESIZE:
            return ["-resize", f"{width}x{height}>"]
        return [
            "-resize", f"x{height * 2}",
            "-resize", f"{width * 2}x<",
            "-resize", "50%",
            "-gravity", "center",
            "-crop", f"{width}x{height}+0+0",
            "+repage",
        ]

    def command(self, mode, source, target, width, height) -> list[str]:
        return [self.binary, str(source), *self.arguments(mode, width, height), str(target)]

    def __call__(self, mode: ResizeMode, source: Path, target: Path, width: int, height: int):
        target = Path(target)
        scratch = partial_path(target)
        cmd = self.command(mode, source, scratch, width, height)
        printable = shlex.join(self.command(mode, source, target, width, height))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, errors="replace")
        except OSError as exc:
            raise ResizeError(printable, cause=exc) from exc
        if result.returncode != 0:
            _discard(scratch)
            raise ResizeError(printable, returncode=result.returncode, stderr=result.stderr)
        os.replace(scratch, target)


RESIZERS = {
    PillowResizer.name: PillowResizer,
    ImageMagickResizer.name: ImageMagickResizer,
}


def get_resizer(name: str):
    try:
        return RESIZERS[name]()
    except KeyError:
        raise ValueError(f"Unknown resizer {name!r}; choose from {', '.join(sorted(RESIZERS))}") from None
