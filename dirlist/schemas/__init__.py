"""Pydantic schemas for API responses."""

from dirlist.schemas.entries import (
    DirectoryEntryResponse,
    ListEntriesResponse,
    RegisteredDirectoryResponse,
    ListDirectoriesResponse
)
from dirlist.schemas.common import ErrorResponse

__all__ = [
    "DirectoryEntryResponse",
    "ListEntriesResponse",
    "RegisteredDirectoryResponse",
    "ListDirectoriesResponse",
    "ErrorResponse"
]
