"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class ListByNameCommand:
    """List entries of a registry-named directory."""

    name: str
    command: Literal["ls"] = "ls"


@dataclass(frozen=True)
class ListByPathCommand:
    """List entries of a directory given by path."""

    path: str
    command: Literal["dir"] = "dir"


@dataclass(frozen=True)
class ListDirectoriesCommand:
    """Show registered directories."""

    command: Literal["dirs"] = "dirs"


CommandRequest = (
    ListByNameCommand
    | ListByPathCommand
    | ListDirectoriesCommand
)
