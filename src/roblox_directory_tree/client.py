"""HTTP client for a running directory tree server."""

from typing import Any

import requests
from loguru import logger

from roblox_directory_tree.config import REQUEST_TIMEOUT, resolve_server_url
from roblox_directory_tree.core.sync.parser import SnapshotParseError, snapshot_from_dict
from roblox_directory_tree.models.node import Snapshot


class ServerUnavailableError(RuntimeError):
    """The tree server could not be reached or answered nonsense."""


class TreeClient:
    """Read-only client for the local tree server."""

    def __init__(self, base_url: str | None = None, *, timeout: float = REQUEST_TIMEOUT) -> None:
        self.base_url = (base_url or resolve_server_url()).rstrip("/")
        self.timeout = timeout
        self.sess = requests.Session()
        logger.debug("Tree client ready: base_url {!r}, timeout {!r}", self.base_url, timeout)

    def get_json(self, path: str) -> Any:
        """GET ``path`` and return the decoded JSON body."""
        url = f"{self.base_url}{path}"
        logger.debug("Requesting {!r}", url)
        try:
            r = self.sess.get(url, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            msg = (
                f"Server not running at {self.base_url}. "
                f"Start it with 'roblox-tree serve' first! ({e})"
            )
            raise ServerUnavailableError(msg) from e
        try:
            return r.json()
        except ValueError as e:
            msg = f"Invalid response from {url}"
            raise ServerUnavailableError(msg) from e

    def ping(self) -> dict[str, Any]:
        return self.get_json("/ping")  # type: ignore[no-any-return]

    def fetch_status(self) -> dict[str, Any]:
        return self.get_json("/status")  # type: ignore[no-any-return]

    def fetch_tree(self) -> Snapshot:
        data = self.get_json("/tree")
        try:
            return snapshot_from_dict(data)
        except SnapshotParseError as e:
            msg = f"Server returned an invalid tree: {e}"
            raise ServerUnavailableError(msg) from e
