"""Utility functions for CLI output."""

from cli.constants import BLUE, RESET, TABLE_HEADER


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"


def format_entry(entry: dict) -> str:
    """
    Format one directory entry as a listing row.

    Args:
        entry: Entry dict with the record fields as returned by the server

    Returns:
        Row string: type, flags, size, modified, name
    """
    modified = entry['modified'].replace('T', ' ')[:19]
    name = entry['name']
    if entry['file_type'] == 'D':
        name = f"{BLUE}{name}{RESET}"
    return (
        f"{entry['file_type']} {entry['readable']} {entry['writeable']} {entry['hidden']} "
        f"{format_file_size(entry['file_size']):>10}  {modified:<19}  {name}"
    )


def format_entries(entries: list[dict]) -> str:
    """
    Format a listing as a table, or a notice when it is empty.
    """
    if not entries:
        return "No entries."
    rows = [TABLE_HEADER] + [format_entry(entry) for entry in entries]
    return '\n'.join(rows) + f"\n{len(entries)} entries"
