"""Project-wide constants (record codes, default ports)."""

FILE_TYPE_DIRECTORY: str = "D"
FILE_TYPE_FILE: str = "F"
FILE_TYPE_UNKNOWN: str = "U"  # neither file nor directory: device, fifo, broken link

FLAG_YES: str = "Y"
FLAG_NO: str = "N"

DEFAULT_SERVER_PORT: int = 8000
