"""Service layer for listing logic."""

from dirlist.services.listing_service import (
    ListingService,
    ValidatedPath,
    list_by_name,
    list_by_path,
)
from dirlist.services.record_mapper import to_record

__all__ = [
    "ListingService",
    "ValidatedPath",
    "list_by_name",
    "list_by_path",
    "to_record",
]
