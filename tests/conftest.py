"""Shared pytest fixtures for all tests."""

from pathlib import Path
from typing import Generator

import pytest

from cli.config import Config
from dirlist.database import init_database
from fakes import InMemoryRegistry


@pytest.fixture
def registry():
    """Empty in-memory registry."""
    return InMemoryRegistry()


@pytest.fixture
def test_db(monkeypatch, tmp_path) -> Generator[Path, None, None]:
    """
    Create a temporary registry database for each test.
    """
    db_path = tmp_path / "registry.db"
    monkeypatch.setattr("dirlist.config.DATABASE_PATH", str(db_path))
    init_database()
    yield db_path


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """
    Directory holding one 10-byte file and one subdirectory.

    Returns:
        Path to the data directory
    """
    data = tmp_path / 'srv' / 'data'
    data.mkdir(parents=True)
    (data / 'report.txt').write_bytes(b'0123456789')
    (data / 'archive').mkdir()
    (data / 'archive' / 'old.txt').write_text('nested content')
    return data


@pytest.fixture
def empty_dir(tmp_path) -> Path:
    empty = tmp_path / 'srv' / 'empty'
    empty.mkdir(parents=True)
    return empty


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Returns:
        Path to temporary .dirlist directory
    """
    config_dir = tmp_path / '.dirlist'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.

    Returns:
        Config instance with temp config file
    """
    return Config(temp_config_dir / 'config.json')

