"""Synchronous Textile client.

Provides ``TextileClient``, a fully synchronous wrapper around the
Textile daemon HTTP API using :mod:`httpx`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import httpx

from textile_client._transport import build_headers, error_from_response
from textile_client.config import DEFAULT_API_OPTIONS, ApiOptions
from textile_client.exceptions import TextileConnectionError
from textile_client.namespaces import SchemasNamespace, ThreadsNamespace

logger = logging.getLogger(__name__)


class TextileClient:
    """Synchronous client for the Textile daemon HTTP API.

    Usage::

        from textile_client import TextileClient

        client = TextileClient()
        thread = client.threads.add("chat", type="open", sharing="shared")
        print(client.threads.list().items)

    The client manages its own :class:`httpx.Client` instance. Use it as a
    context manager to ensure the underlying connection pool is closed
    promptly::

        with TextileClient(ApiOptions(port=40601)) as client:
            print(client.threads.peers())

    Args:
        options: Daemon location and request timeout. Defaults to the
            local daemon on port 40600.
    """

    def __init__(self, options: ApiOptions = DEFAULT_API_OPTIONS) -> None:
        self.options = options
        self._base_url = options.base_url
        self._http = httpx.Client(
            base_url=self._base_url,
            timeout=options.timeout,
        )

        # Namespace accessors
        self.schemas = SchemasNamespace(self)
        self.threads = ThreadsNamespace(self, self.schemas)

    # -- Context manager ----------------------------------------------------

    def __enter__(self) -> TextileClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    # -- Internal HTTP helpers ----------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        json: Any | None = None,
        check: bool = True,
    ) -> httpx.Response:
        """Send one request, raising ``TextileError`` on non-2xx when ``check``."""
        logger.debug("%s %s", method, path)
        try:
            response = self._http.request(
                method,
                path,
                headers=build_headers(args, opts),
                json=json,
            )
        except httpx.TransportError as exc:
            raise TextileConnectionError(f"{method} {path} failed: {exc}") from exc

        logger.debug("%s %s -> %s", method, path, response.status_code)
        if check and not response.is_success:
            raise error_from_response(response)
        return response

    def _get(
        self,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        check: bool = True,
    ) -> httpx.Response:
        """Send a GET request."""
        return self._request("GET", path, args=args, opts=opts, check=check)

    def _post(
        self,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        json: Any | None = None,
        check: bool = True,
    ) -> httpx.Response:
        """Send a POST request."""
        return self._request("POST", path, args=args, opts=opts, json=json, check=check)

    def _put(
        self,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        json: Any | None = None,
        check: bool = True,
    ) -> httpx.Response:
        """Send a PUT request."""
        return self._request("PUT", path, args=args, opts=opts, json=json, check=check)

    def _delete(self, path: str, *, check: bool = True) -> httpx.Response:
        """Send a DELETE request."""
        return self._request("DELETE", path, check=check)
