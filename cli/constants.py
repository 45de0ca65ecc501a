"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = ["ls", "dir", "dirs", "clear", "exit", "help"]

STYLE = Style.from_dict(
    {
        "prompt": "#2E9E6B bold",
        "command": "#0088ff bold",
    }
)

GREEN = "\033[38;2;46;158;107m"
BLUE = "\033[38;2;0;136;255m"
RESET = "\033[0m"

WELCOME_TITLE = f"{GREEN}dirlist{RESET} - named directory listings"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "dirlist> "

HELP_TEXT = """Available commands:
  ls <name>        List entries of the directory registered under <name> (case sensitive)
  dir <path>       List entries of the directory at <path> on the server
  dirs             Show registered directory names and paths
  clear            Clear screen and redisplay welcome message
  help             Show this help
  exit             Exit REPL

Columns: type (D=directory F=file U=other), r/w/h (readable, writeable, hidden),
size, last modified, name.
Examples:
  dirs
  ls DATA_DIR
  dir /srv/data
  dir '/srv/my files'"""

TABLE_HEADER = "T R W H       SIZE  MODIFIED             NAME"
