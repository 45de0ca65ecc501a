"""Mapping of raw filesystem entries to DirectoryEntryRecord values."""

import os
import stat
from datetime import datetime
from typing import Optional

from common.constants import (
    FILE_TYPE_DIRECTORY,
    FILE_TYPE_FILE,
    FILE_TYPE_UNKNOWN,
    FLAG_NO,
    FLAG_YES,
)
from common.types import DirectoryEntryRecord

EPOCH = datetime.fromtimestamp(0)


def encode_flag(value: bool) -> str:
    return FLAG_YES if value else FLAG_NO


def classify_entry(entry: os.DirEntry) -> str:
    """
    Classify an entry as directory, regular file or neither.

    Links are classified by their target; a broken link is neither.
    """
    try:
        if entry.is_dir():
            return FILE_TYPE_DIRECTORY
        if entry.is_file():
            return FILE_TYPE_FILE
    except OSError:
        pass
    return FILE_TYPE_UNKNOWN


def is_hidden(entry: os.DirEntry, stat_result: Optional[os.stat_result]) -> bool:
    """
    Platform hidden attribute: FILE_ATTRIBUTE_HIDDEN where the filesystem
    reports attributes (Windows), a leading dot everywhere else.
    """
    attributes = getattr(stat_result, "st_file_attributes", None)
    if attributes is not None:
        return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)
    return entry.name.startswith(".")


def _safe_stat(entry: os.DirEntry) -> Optional[os.stat_result]:
    try:
        return entry.stat()
    except OSError:
        return None


def to_record(entry: os.DirEntry) -> DirectoryEntryRecord:
    """
    Convert one enumerated entry into a DirectoryEntryRecord.

    Entries that cannot be stat'ed (a broken link, or one deleted since
    enumeration) report size 0 and an epoch modification time.

    Args:
        entry: Entry as yielded by os.scandir

    Returns:
        Record for the entry
    """
    stat_result = _safe_stat(entry)

    if stat_result is not None:
        file_size = stat_result.st_size
        modified = datetime.fromtimestamp(stat_result.st_mtime)
    else:
        file_size = 0
        modified = EPOCH

    return DirectoryEntryRecord(
        file_type=classify_entry(entry),
        readable=encode_flag(os.access(entry.path, os.R_OK)),
        writeable=encode_flag(os.access(entry.path, os.W_OK)),
        hidden=encode_flag(is_hidden(entry, stat_result)),
        file_size=file_size,
        modified=modified,
        name=entry.name,
    )
