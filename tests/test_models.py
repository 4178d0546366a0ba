"""Tests for storyreel.models."""

import pytest

from storyreel.models import (
    Asset,
    AssetKind,
    FileDescriptor,
    Storyboard,
    Transition,
    parse_duration,
)


class TestParseDuration:
    @pytest.mark.parametrize("raw,expected", [
        ("1", 1),
        ("60", 60),
        (" 15 ", 15),
        (30, 30),
        (12.0, 12),
        ("12.0", 12),
    ])
    def test_valid(self, raw, expected):
        assert parse_duration(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "0", "61", "-3", "2.5", "12.5", "nan", "inf", 7.5, None, True])
    def test_falls_back(self, raw):
        assert parse_duration(raw) == 5

    def test_custom_default(self):
        assert parse_duration("x", default=8) == 8


class TestAssetKind:
    @pytest.mark.parametrize("mime_type,kind", [
        ("image/png", AssetKind.IMAGE),
        ("image/svg+xml", AssetKind.IMAGE),
        ("video/quicktime", AssetKind.VIDEO),
        ("audio/mpeg", AssetKind.AUDIO),
        ("application/octet-stream", AssetKind.AUDIO),
        ("", AssetKind.AUDIO),
    ])
    def test_from_mime_type(self, mime_type, kind):
        assert AssetKind.from_mime_type(mime_type) == kind


class TestAssetSizeLabel:
    @pytest.mark.parametrize("size,label", [
        (512, "512 B"),
        (1536, "1.5 KB"),
        (3 * 1024 * 1024, "3.0 MB"),
    ])
    def test_label(self, size, label):
        asset = Asset(id="a", kind=AssetKind.AUDIO, name="n", url="u", size=size)
        assert asset.size_label == label


class TestFileDescriptor:
    def test_from_path(self, tmp_path):
        path = tmp_path / "intro.mp4"
        path.write_bytes(b"1234")
        descriptor = FileDescriptor.from_path(path)
        assert descriptor.name == "intro.mp4"
        assert descriptor.mime_type == "video/mp4"
        assert descriptor.size == 4
        assert descriptor.data == b"1234"


class TestStoryboard:
    def test_from_yaml(self, tmp_path):
        path = tmp_path / "storyboard.yaml"
        path.write_text(
            "title: Launch video\n"
            "scenes:\n"
            "  - script: Meet the team\n"
            "    duration: 8\n"
            "    transition: slide\n"
            "  - script: Sign up today\n"
            "    duration: lots\n"
        )
        board = Storyboard.from_yaml(path)
        assert board.title == "Launch video"
        assert [s.duration for s in board.scenes] == [8, 5]
        assert board.scenes[0].transition == Transition.SLIDE
        assert board.scenes[1].transition == Transition.FADE

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        board = Storyboard.from_yaml(path)
        assert board.scenes == []
