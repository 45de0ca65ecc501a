"""Registry-named directory API routes."""

from fastapi import APIRouter

from dirlist.repositories.directory_repository import DirectoryRepository
from dirlist.schemas.entries import (
    DirectoryEntryResponse,
    ListDirectoriesResponse,
    ListEntriesResponse,
    RegisteredDirectoryResponse
)
from dirlist.services.listing_service import ListingService

router = APIRouter(prefix="/directories", tags=["Directories"])


@router.get("", response_model=ListDirectoriesResponse)
def list_directories():
    """
    List every registered logical directory name and its path.
    """
    directories = DirectoryRepository.list_all()
    return ListDirectoriesResponse(
        directories=[
            RegisteredDirectoryResponse(name=d.name, path=d.path) for d in directories
        ]
    )


@router.get("/{name:path}/entries", response_model=ListEntriesResponse)
def list_entries_by_name(name: str):
    """
    List the immediate entries of a registry-named directory.

    Parameters:
        - name: Logical directory name (case sensitive)

    Returns:
        - path: Filesystem path the name resolved to
        - entries: One record per immediate child (unordered)

    Raises:
        - 404: Name not registered, or registered path does not exist
        - 400: Registered path is not a directory
        - 500: Enumeration failed
    """
    listing_service = ListingService()
    path, records = listing_service.resolve_and_list(name)

    return ListEntriesResponse(
        location=name,
        path=path,
        entries=[DirectoryEntryResponse.from_record(r) for r in records]
    )
