"""Tests for DirListCompleter."""

import pytest
from prompt_toolkit.document import Document

from cli.completer import DirListCompleter
from cli.constants import COMMANDS


@pytest.fixture
def completer():
    """Create a completer with a fixed set of registered names."""
    return DirListCompleter(lambda: ['DATA_DIR', 'LOGS', 'DATA_ARCHIVE'])


def get_completions_list(completer, text):
    """Helper to get list of completion texts from completer."""
    doc = Document(text, len(text))
    return [c.text for c in completer.get_completions(doc, None)]


class TestCommandCompletion:
    def test_empty_input_offers_all_commands(self, completer):
        assert get_completions_list(completer, '') == COMMANDS

    def test_partial_command(self, completer):
        assert get_completions_list(completer, 'di') == ['dir', 'dirs']


class TestNameCompletion:
    def test_ls_offers_registered_names(self, completer):
        assert get_completions_list(completer, 'ls ') == ['DATA_ARCHIVE', 'DATA_DIR', 'LOGS']

    def test_ls_partial_name(self, completer):
        assert get_completions_list(completer, 'ls DATA_D') == ['DATA_DIR']

    def test_name_matching_is_case_sensitive(self, completer):
        assert get_completions_list(completer, 'ls data') == []

    def test_no_completion_after_name(self, completer):
        assert get_completions_list(completer, 'ls LOGS ') == []

    def test_dir_has_no_name_completion(self, completer):
        assert get_completions_list(completer, 'dir ') == []

    def test_names_are_cached_until_refresh(self):
        calls = []

        def provider():
            calls.append(1)
            return ['LOGS']

        completer = DirListCompleter(provider)
        get_completions_list(completer, 'ls ')
        get_completions_list(completer, 'ls L')
        assert len(calls) == 1

        completer.refresh()
        get_completions_list(completer, 'ls ')
        assert len(calls) == 2

    def test_without_provider(self):
        assert get_completions_list(DirListCompleter(), 'ls ') == []
