"""Directory registry repository for database operations."""

from dataclasses import dataclass
from typing import List, Optional, Protocol

from common.logging_config import get_logger
from dirlist.database import get_db_connection

logger = get_logger(__name__)


@dataclass(frozen=True)
class RegisteredDirectory:
    name: str
    path: str


class DirectoryRegistry(Protocol):
    """Read-only name -> path lookup consumed by the listing service."""

    def get_path(self, name: str) -> Optional[str]:
        ...


class DirectoryRepository:
    @staticmethod
    def get_path(name: str) -> Optional[str]:
        """
        Look up the filesystem path registered for a logical name.

        Names are matched case-sensitively. When several rows share a name
        the first registered one wins.

        Args:
            name: Logical directory name

        Returns:
            Registered path, or None if the name is unknown
        """
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT directory_path FROM directories
                WHERE directory_name = ?
                ORDER BY rowid
                LIMIT 1
                """,
                (name,)
            )
            row = cursor.fetchone()

            if row is None:
                logger.debug(f"Registry miss [name={name}]")
                return None

            logger.debug(f"Registry hit [name={name}] path={row['directory_path']}")
            return row["directory_path"]

    @staticmethod
    def register(name: str, path: str, conn=None) -> RegisteredDirectory:
        should_close = conn is None
        if conn is None:
            conn = get_db_connection().__enter__()

        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO directories (directory_name, directory_path) VALUES (?, ?)",
                (name, path)
            )
            if should_close:
                conn.commit()
            return RegisteredDirectory(name=name, path=path)
        finally:
            if should_close:
                conn.close()

    @staticmethod
    def list_all() -> List[RegisteredDirectory]:
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT directory_name, directory_path FROM directories ORDER BY directory_name, rowid"
            )
            rows = cursor.fetchall()
            return [
                RegisteredDirectory(name=row["directory_name"], path=row["directory_path"])
                for row in rows
            ]
