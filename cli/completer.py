"""Custom completer for the dirlist CLI with registered-name completion."""

from typing import Callable, Iterable, Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS


class DirListCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - Registered directory name completion for the 'ls' command
    """

    def __init__(self, names_provider: Optional[Callable[[], list[str]]] = None):
        """
        Args:
            names_provider: Callable returning registered names; called lazily
                and cached until refresh() is called
        """
        self.names_provider = names_provider
        self._names: Optional[list[str]] = None

    def refresh(self) -> None:
        """Forget cached names so the next completion fetches them again."""
        self._names = None

    def _registered_names(self) -> list[str]:
        if self.names_provider is None:
            return []
        if self._names is None:
            self._names = sorted(set(self.names_provider()))
        return self._names

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on cursor position and context.
        """
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        if tokens[0] != "ls":
            return

        # ls takes a single argument
        if len(tokens) > 2 or (len(tokens) == 2 and is_typing_new_token):
            return

        current_word = "" if is_typing_new_token else tokens[-1]
        yield from self._complete_names(current_word)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_names(self, partial: str) -> Iterable[Completion]:
        """Complete registered names; matching is case sensitive like the registry."""
        for name in self._registered_names():
            if name.startswith(partial):
                yield Completion(name, start_position=-len(partial))
