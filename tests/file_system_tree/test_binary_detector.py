"""Tests for binary file detection functionality."""

import logging

import pytest

from dir2summary.file_system_tree.binary_detector import (
    BINARY_SIGNATURES,
    NUL_WINDOW,
    is_binary_file,
    matches_binary_signature,
)


class TestBinaryFileDetection:
    """Test binary file detection logic."""

    def test_empty_file_is_text(self, tmp_path):
        path = tmp_path / "empty"
        path.write_bytes(b"")
        assert not is_binary_file(path)

    def test_text_file_detection(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("Hello, world!\nThis is a text file.\n")
        assert not is_binary_file(path)

    def test_utf8_text_is_text(self, tmp_path):
        path = tmp_path / "greeting.txt"
        path.write_text("Hello, 世界! Ünïcödé\n", encoding="utf-8")
        assert not is_binary_file(path)

    def test_nul_byte_makes_file_binary(self, tmp_path):
        path = tmp_path / "b.bin"
        path.write_bytes(b"Hello\x00World")
        assert is_binary_file(path)

    def test_nul_at_last_position_of_window(self, tmp_path):
        path = tmp_path / "late.dat"
        path.write_bytes(b"a" * (NUL_WINDOW - 1) + b"\x00")
        assert is_binary_file(path)

    def test_nul_beyond_window_is_text(self, tmp_path):
        path = tmp_path / "later.dat"
        path.write_bytes(b"a" * NUL_WINDOW + b"\x00")
        assert not is_binary_file(path)

    def test_custom_window(self, tmp_path):
        path = tmp_path / "custom.dat"
        path.write_bytes(b"abc\x00")
        assert not is_binary_file(path, nul_window=3)
        assert is_binary_file(path, nul_window=4)

    @pytest.mark.parametrize(
        "content",
        [
            b"\x7fELF\x02\x01\x01",
            b"\x89PNG\r\n\x1a\n",
            b"\xff\xd8\xff\xe0JFIF",
            b"GIF89a",
            b"PK\x03\x04rest-of-zip",
            b"\x1f\x8b\x08",
            b"%PDF-1.7\n",
            b"SQLite format 3\x00",
            b"RIFF\x24\x00\x00\x00WAVEfmt ",
        ],
    )
    def test_signature_detection_without_nul_in_prefix(self, tmp_path, content):
        path = tmp_path / "blob"
        path.write_bytes(content + b"\n" * 10)
        assert is_binary_file(path)

    def test_tar_signature_at_offset(self, tmp_path):
        path = tmp_path / "archive"
        path.write_bytes(b"x" * 257 + b"ustar\x0000" + b"y" * 100)
        assert is_binary_file(path)

    def test_text_resembling_signature_prefix(self, tmp_path):
        path = tmp_path / "riff.md"
        path.write_text("RIFF is a generic container format.\n")
        assert not is_binary_file(path)

    def test_unreadable_file_is_text_and_logged(self, tmp_path, caplog):
        missing = tmp_path / "missing.txt"
        with caplog.at_level(logging.WARNING):
            assert not is_binary_file(missing)
        assert "Failed to read" in caplog.text
        assert "missing.txt" in caplog.text

    def test_directory_is_not_binary(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            assert not is_binary_file(tmp_path)


class TestSignatures:
    def test_signature_table_shape(self):
        for signature in BINARY_SIGNATURES:
            assert signature
            for offset, magic in signature:
                assert offset >= 0
                assert isinstance(magic, bytes) and magic

    def test_all_parts_must_match(self):
        assert matches_binary_signature(b"RIFF\x00\x00\x00\x00WEBPVP8 ")
        assert not matches_binary_signature(b"RIFF\x00\x00\x00\x00TEXT")

    @pytest.mark.parametrize(
        "content",
        [
            b"OTTO\x00\x0a\x00\x80",
            b"wOFF\x00\x01\x00\x00\x00\x00",
            b"wOF2OTTO\x00\x00",
            b"8BPS\x00\x01\x00\x00",
            b"OggS\x00\x02",
            b"fLaC\x00\x00\x00\x22\x10",
            b"dex\n035\x00" + b"\x11" * 28 + b"\x70\x00\x00\x00",
            b"\x00\x00\x00\x20ftypisom",
            b"x" * 257 + b"ustar  \x00",
        ],
    )
    def test_full_headers_match(self, content):
        assert matches_binary_signature(content)

    @pytest.mark.parametrize(
        "text",
        [
            "OTTO called about the meeting.\n",
            "wOFF and wOF2 are web font formats.\n",
            "8BPS is the Photoshop signature.\n",
            "OggS pages carry Vorbis audio.\n",
            "fLaC streams are lossless.\n",
            "dex\nfiles hold Dalvik bytecode for Android applications.\n",
            "abcdftyp is not a media file.\n",
        ],
    )
    def test_text_starting_with_signature_word_stays_text(self, tmp_path, text):
        path = tmp_path / "notes.txt"
        path.write_text(text)
        assert not matches_binary_signature(text.encode())
        assert not is_binary_file(path)

    def test_short_data(self):
        assert not matches_binary_signature(b"")
        assert not matches_binary_signature(b"P")
