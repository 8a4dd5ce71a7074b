"""Asynchronous Textile client.

Provides ``AsyncTextileClient``, an async wrapper around the Textile
daemon HTTP API using :mod:`httpx` with ``AsyncClient``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import httpx

from textile_client._transport import build_headers, error_from_response
from textile_client.config import DEFAULT_API_OPTIONS, ApiOptions
from textile_client.exceptions import TextileConnectionError
from textile_client.namespaces import AsyncSchemasNamespace, AsyncThreadsNamespace

logger = logging.getLogger(__name__)


class AsyncTextileClient:
    """Asynchronous client for the Textile daemon HTTP API.

    Usage::

        import asyncio
        from textile_client import AsyncTextileClient

        async def main():
            async with AsyncTextileClient() as client:
                threads = await client.threads.list()
                print(threads.items)

        asyncio.run(main())

    Closing the client waits for any ``threads.add_or_update`` writes that
    are still in flight.

    Args:
        options: Daemon location and request timeout. Defaults to the
            local daemon on port 40600.
    """

    def __init__(self, options: ApiOptions = DEFAULT_API_OPTIONS) -> None:
        self.options = options
        self._base_url = options.base_url
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=options.timeout,
        )

        # Namespace accessors
        self.schemas = AsyncSchemasNamespace(self)
        self.threads = AsyncThreadsNamespace(self, self.schemas)

    # -- Context manager ----------------------------------------------------

    async def __aenter__(self) -> AsyncTextileClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Wait for background writes, then close the connection pool."""
        await self.threads.drain()
        await self._http.aclose()

    # -- Internal HTTP helpers ----------------------------------------------

    async def _request(
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
            response = await self._http.request(
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

    async def _get(
        self,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        check: bool = True,
    ) -> httpx.Response:
        """Send an async GET request."""
        return await self._request("GET", path, args=args, opts=opts, check=check)

    async def _post(
        self,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        json: Any | None = None,
        check: bool = True,
    ) -> httpx.Response:
        """Send an async POST request."""
        return await self._request(
            "POST", path, args=args, opts=opts, json=json, check=check
        )

    async def _put(
        self,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        json: Any | None = None,
        check: bool = True,
    ) -> httpx.Response:
        """Send an async PUT request."""
        return await self._request(
            "PUT", path, args=args, opts=opts, json=json, check=check
        )

    async def _delete(self, path: str, *, check: bool = True) -> httpx.Response:
        """Send an async DELETE request."""
        return await self._request("DELETE", path, check=check)
