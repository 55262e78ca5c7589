import logging
from pathlib import Path

import pytest
from PIL import Image

from gallpy.errors import ResizeError


def make_image(path: Path, size=(400, 300), color=(200, 40, 40)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color).save(path)
    return path


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


class RecordingResizer:
    """Stands in for a real resizer: writes a marker file and remembers each call."""

    def __init__(self, fail_on=()):
        self.calls = []
        self.fail_on = set(fail_on)

    def __call__(self, mode, source, target, width, height):
        self.calls.append((mode, Path(source), Path(target), width, height))
        if Path(source).name in self.fail_on:
            raise ResizeError(f"fake {source} {target}", returncode=1)
        Path(target).write_bytes(b"resized")

    @property
    def targets(self):
        return [call[2] for call in self.calls]


@pytest.fixture
def resizer():
    return RecordingResizer()


@pytest.fixture
def logger():
    log = logging.getLogger("gallpy.tests")
    log.setLevel(logging.DEBUG)
    return log


@pytest.fixture
def trip_tree(tmp_path):
    """root/{a.jpg, b.jpg, Trip/c.jpg}"""
    touch(tmp_path / "a.jpg")
    touch(tmp_path / "b.jpg")
    touch(tmp_path / "Trip" / "c.jpg")
    return tmp_path
