"""Repository layer for registry access."""

from dirlist.repositories.directory_repository import (
    DirectoryRegistry,
    DirectoryRepository,
    RegisteredDirectory,
)

__all__ = [
    "DirectoryRegistry",
    "DirectoryRepository",
    "RegisteredDirectory",
]
