"""Path-based directory listing API routes."""

from fastapi import APIRouter, Query

from dirlist.schemas.entries import DirectoryEntryResponse, ListEntriesResponse
from dirlist.services.listing_service import ListingService

router = APIRouter(prefix="/entries", tags=["Entries"])


@router.get("", response_model=ListEntriesResponse)
def list_entries_by_path(path: str = Query(...)):
    """
    List the immediate entries of a directory given by filesystem path.

    Parameters:
        - path: Filesystem path of the directory

    Returns:
        - entries: One record per immediate child (unordered)

    Raises:
        - 404: Path does not exist
        - 400: Path is not a directory
        - 500: Enumeration failed
    """
    listing_service = ListingService()
    records = listing_service.list_by_path(path)

    return ListEntriesResponse(
        path=path,
        entries=[DirectoryEntryResponse.from_record(r) for r in records]
    )
