"""Shared data type definitions (DirectoryEntryRecord)."""

from dataclasses import astuple, dataclass
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class DirectoryEntryRecord:
    """
    One immediate child of a listed directory.

    Field order is fixed and forms the external record shape:
    file_type, readable, writeable, hidden, file_size, modified, name.
    """
    file_type: str
    readable: str
    writeable: str
    hidden: str
    file_size: int
    modified: datetime
    name: str

    def as_row(self) -> Tuple[str, str, str, str, int, datetime, str]:
        """
        Return the record fields as a tuple in external field order.
        """
        return astuple(self)
