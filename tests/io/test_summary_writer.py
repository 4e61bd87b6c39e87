"""Unit tests for the SummaryWriter class."""

from unittest.mock import MagicMock

import pytest

from dir2summary.exceptions import OutputFileError
from dir2summary.io.summary_writer import SummaryWriter


def test_write_and_flush(tmp_path):
    path = tmp_path / "summary.txt"
    with SummaryWriter(path) as writer:
        writer.write("project\n")
        writer.write("└── src\n")
        writer.flush()
        assert path.read_text(encoding="utf-8") == "project\n└── src\n"

    assert writer.closed


def test_existing_file_is_truncated(tmp_path):
    path = tmp_path / "summary.txt"
    path.write_text("old content that is longer than the new one\n")

    with SummaryWriter(path) as writer:
        writer.write("new\n")

    assert path.read_text() == "new\n"


def test_unencodable_characters_are_replaced(tmp_path):
    path = tmp_path / "summary.txt"
    with SummaryWriter(path) as writer:
        writer.write("bad\udcff.txt\n")

    assert path.read_bytes() == b"bad?.txt\n"


def test_creation_failure(tmp_path):
    with pytest.raises(OutputFileError) as exc_info:
        SummaryWriter(tmp_path / "missing-dir" / "summary.txt")

    assert isinstance(exc_info.value.__cause__, OSError)
    assert exc_info.value.path.endswith("summary.txt")


def test_directory_as_output(tmp_path):
    with pytest.raises(OutputFileError):
        SummaryWriter(tmp_path)


def test_closed_writer_rejects_operations(tmp_path):
    writer = SummaryWriter(tmp_path / "summary.txt")
    writer.close()
    writer.close()

    with pytest.raises(ValueError, match="Cannot write to closed SummaryWriter"):
        writer.write("x")
    with pytest.raises(ValueError, match="Cannot flush closed SummaryWriter"):
        writer.flush()


def test_close_error_does_not_mask_original_exception(tmp_path):
    writer = SummaryWriter(tmp_path / "summary.txt")
    real_file = writer._file
    writer._file = MagicMock()
    writer._file.close.side_effect = OSError("close failed")

    with pytest.raises(RuntimeError, match="original"):
        with writer:
            raise RuntimeError("original")

    assert writer.closed
    real_file.close()


def test_close_error_raised_without_original_exception(tmp_path):
    writer = SummaryWriter(tmp_path / "summary.txt")
    real_file = writer._file
    writer._file = MagicMock()
    writer._file.close.side_effect = OSError("close failed")

    with pytest.raises(OSError, match="close failed"):
        with writer:
            pass

    real_file.close()
