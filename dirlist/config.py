"""Configuration settings for the listing server."""

import os

from common.constants import DEFAULT_SERVER_PORT


DATABASE_PATH = os.environ.get("DIRLIST_DATABASE_PATH", "/app/data/registry.db")

SERVER_HOST = os.environ.get("DIRLIST_HOST", "0.0.0.0")

SERVER_PORT = int(os.environ.get("DIRLIST_PORT", str(DEFAULT_SERVER_PORT)))
