"""Tests for CLI command handlers and parser."""

from unittest.mock import Mock

import pytest

from cli.commands import handle_dir, handle_dirs, handle_ls
from cli.models import ListByNameCommand, ListByPathCommand, ListDirectoriesCommand
from cli.parser import ParseError, parse_command
from cli.server_client import ServerClient


def test_handle_ls():
    mock_client = Mock(spec=ServerClient)
    mock_client.list_by_name.return_value = "report.txt"

    result = handle_ls(ListByNameCommand(name='DATA_DIR'), client=mock_client)

    assert result == "report.txt"
    mock_client.list_by_name.assert_called_once_with('DATA_DIR')


def test_handle_dir():
    mock_client = Mock(spec=ServerClient)
    mock_client.list_by_path.return_value = "No entries."

    result = handle_dir(ListByPathCommand(path='/srv/empty'), client=mock_client)

    assert result == "No entries."
    mock_client.list_by_path.assert_called_once_with('/srv/empty')


def test_handle_dirs():
    mock_client = Mock(spec=ServerClient)
    mock_client.list_directories.return_value = "DATA_DIR  /srv/data"

    assert handle_dirs(ListDirectoriesCommand(), client=mock_client) == "DATA_DIR  /srv/data"


class TestParser:
    def test_parse_ls(self):
        assert parse_command('ls DATA_DIR') == ListByNameCommand(name='DATA_DIR')

    def test_parse_dir_with_quoted_path(self):
        assert parse_command('dir "/srv/my files"') == ListByPathCommand(path='/srv/my files')

    def test_parse_dirs(self):
        assert parse_command('dirs') == ListDirectoriesCommand()

    @pytest.mark.parametrize('line', ['ls', 'ls a b', 'dir', 'dirs extra', 'rm x', '   ', 'dir "unterminated'])
    def test_invalid_input(self, line):
        with pytest.raises(ParseError):
            parse_command(line)
