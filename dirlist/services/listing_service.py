"""Listing service: registry lookup, path validation, enumeration and mapping."""

import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from common.logging_config import get_logger
from common.types import DirectoryEntryRecord
from dirlist.exceptions import (
    EnumerationIOError,
    NotADirectory,
    PathNotFound,
    RegistryNameNotFound,
)
from dirlist.repositories.directory_repository import DirectoryRegistry, DirectoryRepository
from dirlist.services.record_mapper import to_record

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidatedPath:
    """A path that existed and was a directory when it was checked."""
    path: str


class ListingService:
    def __init__(self, registry: Optional[DirectoryRegistry] = None):
        self.registry = registry if registry is not None else DirectoryRepository()

    def resolve_path(self, name: str) -> str:
        """
        Resolve a logical directory name to its registered path.

        Raises:
            RegistryNameNotFound: If the name has no registry entry
        """
        path = self.registry.get_path(name)
        if path is None:
            logger.debug(f"Registry name not found [name={name}]")
            raise RegistryNameNotFound(name)
        return path

    @staticmethod
    def validate_directory(path: str) -> ValidatedPath:
        """
        Confirm a path exists and is a directory.

        Raises:
            PathNotFound: If nothing exists at the path
            NotADirectory: If the path exists but is not a directory
        """
        if not os.path.exists(path):
            logger.debug(f"Path does not exist [path={path}]")
            raise PathNotFound(path)
        if not os.path.isdir(path):
            logger.debug(f"Path is not a directory [path={path}]")
            raise NotADirectory(path)
        return ValidatedPath(path)

    @staticmethod
    def list_children(directory: ValidatedPath) -> Optional[List[os.DirEntry]]:
        """
        List the immediate children of a validated directory.

        Returns:
            Entries in enumeration order, or None when the directory could
            not be read (permission revoked or removed since validation)

        Raises:
            EnumerationIOError: On any other I/O failure
        """
        try:
            with os.scandir(directory.path) as entries:
                return list(entries)
        except (PermissionError, FileNotFoundError, NotADirectoryError) as e:
            logger.warning(
                f"Directory unreadable during enumeration, reporting no entries "
                f"[path={directory.path}] error={type(e).__name__}"
            )
            return None
        except OSError as e:
            logger.debug(f"Enumeration failed [path={directory.path}] error={e}")
            raise EnumerationIOError(directory.path, e.strerror or str(e)) from e

    def list_by_name(self, name: str) -> List[DirectoryEntryRecord]:
        """
        List the entries of the directory registered under a logical name.

        Args:
            name: Logical directory name (case sensitive)

        Returns:
            One record per immediate child, in enumeration order
        """
        return self.resolve_and_list(name)[1]

    def resolve_and_list(self, name: str) -> Tuple[str, List[DirectoryEntryRecord]]:
        """
        Same pipeline as list_by_name, also returning the resolved path.
        """
        logger.info(f"Listing directory by name [name={name}]")
        path = self.resolve_path(name)
        return path, self._list(self.validate_directory(path))

    def list_by_path(self, path: str) -> List[DirectoryEntryRecord]:
        """
        List the entries of a directory given by filesystem path.

        Args:
            path: Filesystem path of the directory

        Returns:
            One record per immediate child, in enumeration order
        """
        logger.info(f"Listing directory by path [path={path}]")
        return self._list(self.validate_directory(path))

    def _list(self, directory: ValidatedPath) -> List[DirectoryEntryRecord]:
        entries = self.list_children(directory)
        if entries is None:
            return []

        records = [to_record(entry) for entry in entries]
        logger.info(f"Listed {len(records)} entries [path={directory.path}]")
        return records


def list_by_name(name: str, registry: Optional[DirectoryRegistry] = None) -> List[DirectoryEntryRecord]:
    return ListingService(registry).list_by_name(name)


def list_by_path(path: str) -> List[DirectoryEntryRecord]:
    return ListingService().list_by_path(path)
