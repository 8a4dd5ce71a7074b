"""Connection settings for the Textile daemon HTTP API."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_URL = "http://127.0.0.1"
DEFAULT_PORT = 40600
DEFAULT_API_VERSION = 0
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ApiOptions:
    """Where the daemon lives and how long to wait for it.

    Passed explicitly to :class:`~textile_client.TextileClient` and
    :class:`~textile_client.AsyncTextileClient`; every request made by a
    client is resolved against :attr:`base_url`.

    Args:
        url: Scheme and host of the daemon.
        port: API port. ``None`` leaves the port out of the URL.
        version: API version segment (``/api/v<version>``).
        timeout: HTTP request timeout in seconds.
    """

    url: str = DEFAULT_URL
    port: int | None = DEFAULT_PORT
    version: int = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        host = self.url.rstrip("/")
        if self.port is not None:
            host = f"{host}:{self.port}"
        return f"{host}/api/v{self.version}"

    @classmethod
    def from_env(cls) -> ApiOptions:
        """Build options from ``TEXTILE_API_*`` environment variables.

        An empty ``TEXTILE_API_PORT`` drops the port from the URL.
        """
        port_raw = os.getenv("TEXTILE_API_PORT")
        if port_raw is None:
            port: int | None = DEFAULT_PORT
        else:
            port = int(port_raw) if port_raw.strip() else None
        return cls(
            url=os.getenv("TEXTILE_API_URL", DEFAULT_URL),
            port=port,
            version=int(os.getenv("TEXTILE_API_VERSION", DEFAULT_API_VERSION)),
            timeout=float(os.getenv("TEXTILE_API_TIMEOUT", DEFAULT_TIMEOUT)),
        )


DEFAULT_API_OPTIONS = ApiOptions()
