"""Test doubles shared across test modules."""

from typing import List, Optional, Tuple


class InMemoryRegistry:
    """Registry fake: ordered (name, path) rows, first match wins."""

    def __init__(self, rows: Optional[List[Tuple[str, str]]] = None):
        self.rows = list(rows or [])
        self.lookups: List[str] = []

    def get_path(self, name: str) -> Optional[str]:
        self.lookups.append(name)
        for row_name, row_path in self.rows:
            if row_name == name:
                return row_path
        return None
