"""Command parser for CLI input."""

import shlex

from cli.models import (
    CommandRequest,
    ListByNameCommand,
    ListByPathCommand,
    ListDirectoriesCommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (one of ListByName/ListByPath/ListDirectories)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]

    if command_name == "ls":
        return _parse_ls(tokens[1:])
    elif command_name == "dir":
        return _parse_dir(tokens[1:])
    elif command_name == "dirs":
        return _parse_dirs(tokens[1:])
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_ls(args: list[str]) -> ListByNameCommand:
    """Parse 'ls <name>' command."""
    if len(args) != 1:
        raise ParseError("ls requires exactly 1 argument: <name>")

    return ListByNameCommand(name=args[0])


def _parse_dir(args: list[str]) -> ListByPathCommand:
    """Parse 'dir <path>' command."""
    if len(args) != 1:
        raise ParseError("dir requires exactly 1 argument: <path> (quote paths containing spaces)")

    return ListByPathCommand(path=args[0])


def _parse_dirs(args: list[str]) -> ListDirectoriesCommand:
    if args:
        raise ParseError("dirs takes no arguments")

    return ListDirectoriesCommand()
