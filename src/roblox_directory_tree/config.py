"""Configuration constants for roblox-directory-tree."""

import os

# Local HTTP server the Studio plugin publishes to.
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 21326

# Environment variable overriding the server URL used by clients.
SERVER_URL_ENV: str = "DIRECTORY_TREE_SERVER"

# Studio counts as connected while its last publish is younger than this (seconds).
FRESHNESS_WINDOW: float = 30.0

# Client-side HTTP timeout (seconds).
REQUEST_TIMEOUT: float = 5.0

# Published trees nested deeper than this are rejected.
MAX_TREE_DEPTH: int = 256

# Name of the placeholder snapshot served before the first publish.
WAITING_NAME: str = "Waiting for Roblox Studio..."

SERVER_NAME: str = "LiveDirectoryTree"


def resolve_server_url() -> str:
    """Return the tree server base URL, honouring the environment override."""
    return os.environ.get(SERVER_URL_ENV) or f"http://localhost:{DEFAULT_PORT}"
