"""Tests for writing text files."""
from __future__ import annotations

import errno
from unittest.mock import patch

import pytest

from vocab_book.errors import DestinationUnavailable, WriteIncomplete
from vocab_book.storage import write_text_file


class TestWriteTextFile:
    def test_creates_file(self, tmp_path):
        f = tmp_path / "out.txt"
        write_text_file(f, "猫,neko,cat\n")
        assert f.read_bytes() == "猫,neko,cat\n".encode("utf-8")

    def test_overwrites_existing(self, tmp_path):
        f = tmp_path / "out.txt"
        f.write_text("old content that is longer than the new one")
        write_text_file(f, "new")
        assert f.read_text() == "new"

    def test_exact_bytes(self, tmp_path):
        f = tmp_path / "out.txt"
        write_text_file(f, "a\r\nb\n")
        assert f.read_bytes() == b"a\r\nb\n"

    def test_empty_payload(self, tmp_path):
        f = tmp_path / "out.txt"
        write_text_file(str(f), "")
        assert f.exists()
        assert f.read_bytes() == b""

    def test_fsyncs_before_returning(self, tmp_path):
        f = tmp_path / "out.txt"
        with patch("vocab_book.storage.os.fsync") as fsync:
            write_text_file(f, "data")
        fsync.assert_called_once()

    def test_missing_parent_directory(self, tmp_path):
        f = tmp_path / "missing" / "out.txt"
        with pytest.raises(DestinationUnavailable) as exc:
            write_text_file(f, "data")
        assert str(exc.value).startswith("failed to create file: ")
        assert not f.exists()
        assert not f.parent.exists()

    def test_destination_is_directory(self, tmp_path):
        with pytest.raises(DestinationUnavailable):
            write_text_file(tmp_path, "data")

    def test_write_failure_removes_partial_file(self, tmp_path):
        f = tmp_path / "out.txt"
        disk_full = OSError(errno.ENOSPC, "No space left on device")
        with patch("vocab_book.storage.os.fsync", side_effect=disk_full):
            with pytest.raises(WriteIncomplete) as exc:
                write_text_file(f, "data")
        assert str(exc.value).startswith("failed to write file: ")
        assert "No space left" in str(exc.value)
        assert exc.value.__cause__ is disk_full
        assert not f.exists()

    def test_unencodable_content(self, tmp_path):
        f = tmp_path / "out.txt"
        with pytest.raises(WriteIncomplete):
            write_text_file(f, "猫", encoding="ascii")
        assert not f.exists()

    def test_unlink_failure_still_reports_write_error(self, tmp_path, caplog):
        f = tmp_path / "out.txt"
        disk_full = OSError(errno.ENOSPC, "No space left on device")
        with patch("vocab_book.storage.os.fsync", side_effect=disk_full), \
             patch("pathlib.Path.unlink", side_effect=PermissionError("read-only")):
            with pytest.raises(WriteIncomplete) as exc:
                write_text_file(f, "data")
        assert exc.value.__cause__ is disk_full
        assert "Could not remove partial file" in caplog.text
