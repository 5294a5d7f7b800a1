"""Tests médiathèque locale — type MIME, chemins, lecture."""
from safe_svg.core.media import LocalMediaLibrary, MediaLibrary, SVG_MIME_TYPE


def make_library(tmp_path):
    (tmp_path / "logo.svg").write_text("<svg></svg>", encoding="utf-8")
    (tmp_path / "photo.png").write_bytes(b"\x89PNG")
    return LocalMediaLibrary(tmp_path, {1: "logo.svg", 2: "photo.png"})


def test_is_media_library(tmp_path):
    assert isinstance(make_library(tmp_path), MediaLibrary)


def test_mime_types(tmp_path):
    media = make_library(tmp_path)
    assert media.get_mime_type(1) == SVG_MIME_TYPE
    assert media.get_mime_type(2) == "image/png"
    assert media.get_mime_type(99) is None


def test_attached_file(tmp_path):
    media = make_library(tmp_path)
    assert media.get_attached_file(1) == str(tmp_path / "logo.svg")
    assert media.get_attached_file(99) is None


def test_read_file(tmp_path):
    media = make_library(tmp_path)
    assert media.read_file(media.get_attached_file(1)) == b"<svg></svg>"
    assert media.read_file(str(tmp_path / "absent.svg")) is None


def test_add(tmp_path):
    media = make_library(tmp_path)
    media.add("icon", "logo.svg")
    assert media.get_mime_type("icon") == SVG_MIME_TYPE
