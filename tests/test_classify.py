from pathlib import Path

from gallpy.classify import PathType, classify, media_kind
from gallpy.config import DERIVATIVE_DIRS, MediaKind

from conftest import touch


def test_directory(tmp_path):
    assert classify(tmp_path) is PathType.DIRECTORY


def test_extensions_are_case_insensitive(tmp_path):
    assert classify(touch(tmp_path / "a.JPG")) is PathType.IMAGE
    assert classify(touch(tmp_path / "b.gif")) is PathType.IMAGE
    assert classify(touch(tmp_path / "c.Mov")) is PathType.MOVIE
    assert classify(touch(tmp_path / "d.avi")) is PathType.MOVIE


def test_unknown(tmp_path):
    assert classify(touch(tmp_path / "notes.txt")) is PathType.UNKNOWN
    assert classify(touch(tmp_path / "README")) is PathType.UNKNOWN


def test_directory_with_media_suffix(tmp_path):
    folder = tmp_path / "odd.jpg"
    folder.mkdir()
    assert classify(folder) is PathType.DIRECTORY


def test_media_kind_table():
    assert media_kind(Path("x.jpg")) is MediaKind.IMAGE
    assert media_kind(Path("x.avi")) is MediaKind.MOVIE
    assert media_kind(Path("x.png")) is None


def test_derivative_dirs():
    assert DERIVATIVE_DIRS == {"tn", "med"}
