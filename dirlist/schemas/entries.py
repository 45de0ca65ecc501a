"""Pydantic schemas for directory listing endpoints."""

import os
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel

from common.types import DirectoryEntryRecord


def wire_name(name: str) -> str:
    """
    Render an enumerated name as valid UTF-8 text.

    Undecodable bytes (surrogate-escaped by os.scandir) become \\xNN escapes.
    """
    return os.fsencode(name).decode("utf-8", "backslashreplace")


class DirectoryEntryResponse(BaseModel):
    """Response model for one directory entry. Field order is part of the contract."""
    file_type: Literal["D", "F", "U"]
    readable: Literal["Y", "N"]
    writeable: Literal["Y", "N"]
    hidden: Literal["Y", "N"]
    file_size: int
    modified: datetime
    name: str

    @classmethod
    def from_record(cls, record: DirectoryEntryRecord) -> "DirectoryEntryResponse":
        return cls(
            file_type=record.file_type,
            readable=record.readable,
            writeable=record.writeable,
            hidden=record.hidden,
            file_size=record.file_size,
            modified=record.modified,
            name=wire_name(record.name),
        )


class ListEntriesResponse(BaseModel):
    """Response model for a directory listing."""
    location: Optional[str] = None
    path: Optional[str] = None
    entries: List[DirectoryEntryResponse]


class RegisteredDirectoryResponse(BaseModel):
    """Response model for a registry entry."""
    name: str
    path: str


class ListDirectoriesResponse(BaseModel):
    """Response model for registry listing."""
    directories: List[RegisteredDirectoryResponse]
