"""Command handler functions for CLI operations."""

from pathlib import Path
from typing import Optional

from common.logging_config import get_logger
from cli.models import (
    ListByNameCommand,
    ListByPathCommand,
    ListDirectoriesCommand,
)
from cli.config import Config
from cli.server_client import ServerClient

logger = get_logger(__name__)


_client: Optional[ServerClient] = None


def get_client() -> ServerClient:
    """
    Get or create global ServerClient instance.

    Returns:
        ServerClient instance
    """
    global _client
    if _client is None:
        logger.debug("Creating new ServerClient instance")
        config = Config(Path.home() / '.dirlist' / 'config.json')
        _client = ServerClient(config)
    return _client


def handle_ls(cmd: ListByNameCommand, client: Optional[ServerClient] = None) -> str:
    """
    Handle 'ls' command.

    Args:
        cmd: ListByNameCommand with the registered name
        client: Optional ServerClient for dependency injection (testing)

    Returns:
        Formatted listing or error message
    """
    logger.info(f"Executing ls command: name={cmd.name}")
    if client is None:
        client = get_client()
    return client.list_by_name(cmd.name)


def handle_dir(cmd: ListByPathCommand, client: Optional[ServerClient] = None) -> str:
    """
    Handle 'dir' command.

    Args:
        cmd: ListByPathCommand with the server-side path
        client: Optional ServerClient for dependency injection (testing)

    Returns:
        Formatted listing or error message
    """
    logger.info(f"Executing dir command: path={cmd.path}")
    if client is None:
        client = get_client()
    return client.list_by_path(cmd.path)


def handle_dirs(cmd: ListDirectoriesCommand, client: Optional[ServerClient] = None) -> str:
    if client is None:
        client = get_client()
    return client.list_directories()
