"""Transport protocol definitions and shared wire helpers.

The protocols define the internal HTTP method signatures that namespace
classes depend on. They are used only for static type checking and are
not instantiated at runtime.

``args`` are positional arguments and ``opts`` named options, both carried
in request headers the way the daemon expects them. With ``check=False``
the response is returned whatever its status.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence
from urllib.parse import quote

import httpx

from textile_client.exceptions import TextileError

ARGS_HEADER = "X-Textile-Args"
OPTS_HEADER = "X-Textile-Opts"


def build_headers(
    args: Sequence[str] | None = None,
    opts: Mapping[str, Any] | None = None,
) -> dict[str, str]:
    """Encode positional args and named opts into daemon request headers.

    Values are URL-encoded, so commas inside a value (such as a joined
    whitelist) never collide with the list separator.
    """
    headers: dict[str, str] = {}
    if args:
        headers[ARGS_HEADER] = ",".join(quote(str(arg), safe="") for arg in args)
    if opts:
        headers[OPTS_HEADER] = ",".join(
            f"{key}={quote(str(value), safe='')}" for key, value in opts.items()
        )
    return headers


def error_from_response(response: httpx.Response) -> TextileError:
    """Build a :class:`TextileError` describing a non-2xx response.

    The daemon usually answers errors with a plain-text body; a JSON
    ``{"error": ...}`` body is understood as well. Any other body is used
    as the message verbatim.
    """
    parsed: Any = None
    try:
        parsed = response.json()
    except ValueError:
        parsed = None

    message: str | None = None
    if isinstance(parsed, dict):
        error = parsed.get("error")
        if isinstance(error, dict):
            message = error.get("message")
        elif isinstance(error, str):
            message = error

    if not message:
        message = response.text.strip()

    message = message or f"HTTP {response.status_code}: {response.reason_phrase}"
    return TextileError(
        message,
        code=f"HTTP_{response.status_code}",
        status=response.status_code,
    )


class SyncTransport(Protocol):
    """Protocol for synchronous HTTP transport methods."""

    def _get(
        self,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        check: bool = True,
    ) -> httpx.Response: ...

    def _post(
        self,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        json: Any | None = None,
        check: bool = True,
    ) -> httpx.Response: ...

    def _put(
        self,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        json: Any | None = None,
        check: bool = True,
    ) -> httpx.Response: ...

    def _delete(self, path: str, *, check: bool = True) -> httpx.Response: ...


class AsyncTransport(Protocol):
    """Protocol for asynchronous HTTP transport methods."""

    async def _get(
        self,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        check: bool = True,
    ) -> httpx.Response: ...

    async def _post(
        self,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        json: Any | None = None,
        check: bool = True,
    ) -> httpx.Response: ...

    async def _put(
        self,
        path: str,
        *,
        args: Sequence[str] | None = None,
        opts: Mapping[str, Any] | None = None,
        json: Any | None = None,
        check: bool = True,
    ) -> httpx.Response: ...

    async def _delete(self, path: str, *, check: bool = True) -> httpx.Response: ...
