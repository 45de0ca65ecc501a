"""Tests for mapping filesystem entries to DirectoryEntryRecord."""

import os
import stat
from datetime import datetime
from types import SimpleNamespace

import pytest

from common.types import DirectoryEntryRecord
from dirlist.services.record_mapper import EPOCH, classify_entry, is_hidden, to_record


def scan(directory):
    with os.scandir(directory) as entries:
        return {entry.name: entry for entry in entries}


class FakeEntry:
    """Minimal os.DirEntry stand-in."""

    def __init__(self, name, path, stat_result=None, is_dir=False, is_file=False, error=None):
        self.name = name
        self.path = path
        self._stat = stat_result
        self._is_dir = is_dir
        self._is_file = is_file
        self._error = error

    def is_dir(self):
        if self._error:
            raise self._error
        return self._is_dir

    def is_file(self):
        if self._error:
            raise self._error
        return self._is_file

    def stat(self):
        if self._stat is None:
            raise FileNotFoundError(self.path)
        return self._stat


def test_regular_file_record(tmp_path):
    target = tmp_path / "report.txt"
    target.write_bytes(b"0123456789")

    record = to_record(scan(tmp_path)["report.txt"])

    assert record == DirectoryEntryRecord(
        file_type="F",
        readable="Y",
        writeable="Y",
        hidden="N",
        file_size=10,
        modified=datetime.fromtimestamp(target.stat().st_mtime),
        name="report.txt",
    )


def test_directory_record(tmp_path):
    (tmp_path / "archive").mkdir()

    record = to_record(scan(tmp_path)["archive"])

    assert record.file_type == "D"
    assert record.name == "archive"


def test_dot_name_is_hidden_on_posix(tmp_path):
    if os.name == "nt":
        pytest.skip("hidden attribute is not name based on Windows")
    (tmp_path / ".profile").write_text("x")

    assert to_record(scan(tmp_path)[".profile"]).hidden == "Y"


def test_hidden_attribute_when_filesystem_reports_attributes():
    entry = FakeEntry("plain.txt", "/tmp/plain.txt")
    hidden_stat = SimpleNamespace(st_file_attributes=stat.FILE_ATTRIBUTE_HIDDEN)
    visible_stat = SimpleNamespace(st_file_attributes=stat.FILE_ATTRIBUTE_ARCHIVE)

    assert is_hidden(entry, hidden_stat) is True
    assert is_hidden(entry, visible_stat) is False


def test_hidden_falls_back_to_name_without_stat():
    assert is_hidden(FakeEntry(".cache", "/tmp/.cache"), None) is True
    assert is_hidden(FakeEntry("cache", "/tmp/cache"), None) is False


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires os.mkfifo")
def test_fifo_is_unclassified(tmp_path):
    os.mkfifo(tmp_path / "pipe")

    assert to_record(scan(tmp_path)["pipe"]).file_type == "U"


@pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
def test_broken_symlink_is_unclassified_with_zero_size(tmp_path):
    os.symlink(tmp_path / "missing", tmp_path / "dangling")

    record = to_record(scan(tmp_path)["dangling"])

    assert record.file_type == "U"
    assert record.file_size == 0
    assert record.modified == EPOCH
    assert record.readable == "N"
    assert record.writeable == "N"
    assert record.name == "dangling"


@pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
def test_symlink_classified_by_target(tmp_path):
    (tmp_path / "real").mkdir()
    os.symlink(tmp_path / "real", tmp_path / "link")

    assert to_record(scan(tmp_path)["link"]).file_type == "D"


@pytest.mark.skipif(
    os.name == "nt" or os.geteuid() == 0,
    reason="permission bits are not enforced for root or on Windows",
)
def test_permission_flags_follow_access(tmp_path):
    locked = tmp_path / "locked.txt"
    locked.write_text("x")
    locked.chmod(0)

    try:
        record = to_record(scan(tmp_path)["locked.txt"])
    finally:
        locked.chmod(stat.S_IRUSR | stat.S_IWUSR)

    assert record.readable == "N"
    assert record.writeable == "N"


def test_classify_errors_as_unclassified():
    entry = FakeEntry("odd", "/tmp/odd", error=PermissionError("denied"))

    assert classify_entry(entry) == "U"


def test_name_taken_verbatim(tmp_path):
    odd_name = "  spaced  name .txt"
    (tmp_path / odd_name).write_text("x")

    assert to_record(scan(tmp_path)[odd_name]).name == odd_name


def test_as_row_field_order(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"abc")

    row = to_record(scan(tmp_path)["a.txt"]).as_row()

    assert row[:5] == ("F", "Y", "Y", "N", 3)
    assert isinstance(row[5], datetime)
    assert row[6] == "a.txt"


def test_records_are_immutable(tmp_path):
    (tmp_path / "a.txt").write_text("x")
    record = to_record(scan(tmp_path)["a.txt"])

    with pytest.raises(AttributeError):
        record.name = "b.txt"
