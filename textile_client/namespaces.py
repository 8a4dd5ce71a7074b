"""Namespace classes for the Textile client.

Each namespace groups related API endpoints and delegates HTTP calls
to the parent client's internal transport methods.
"""

from __future__ import annotations

import asyncio
import copy
import logging
from typing import TYPE_CHECKING, Any, List, Optional
from urllib.parse import quote

from textile_client.models import (
    ContactList,
    FileIndex,
    Thread,
    ThreadList,
    ThreadSharing,
    ThreadType,
)
from textile_client.schema import (
    DEFAULT_SCHEMAS,
    InlineSchema,
    SchemaSpec,
    default_schema,
)

if TYPE_CHECKING:
    from textile_client._transport import AsyncTransport, SyncTransport

logger = logging.getLogger(__name__)

DEFAULT_THREAD = "default"
NO_CONTENT = 204


def _thread_path(thread_id: str, *rest: str) -> str:
    return "/".join(["threads", quote(thread_id, safe=""), *rest])


def _add_opts(
    schema_hash: str,
    key: str | None,
    type: ThreadType | str | None,
    sharing: ThreadSharing | str | None,
    whitelist: list[str] | None,
) -> dict[str, str]:
    """Options for ``POST threads``; unset values fall back to daemon defaults."""
    return {
        "schema": schema_hash,
        "key": key or "",
        "type": ThreadType(type or ThreadType.PRIVATE).value,
        "sharing": ThreadSharing(sharing or ThreadSharing.NOT_SHARED).value,
        "whitelist": ",".join(whitelist or []),
    }


# ---------------------------------------------------------------------------
# Schema resolution
# ---------------------------------------------------------------------------


def resolve_schema(schemas: SchemasNamespace, spec: SchemaSpec | None) -> str:
    """Turn a schema reference into the content hash ``threads.add`` submits.

    Inline schemas are stored and their hash used. A reference naming a
    built-in schema stores that schema (the daemon returns the existing
    hash if it is already stored). Any other reference is taken to be a
    hash already. No schema resolves to ``""`` so the daemon picks one.
    """
    if spec is None:
        return ""
    if isinstance(spec, InlineSchema):
        return schemas.add(spec.body).hash

    known = schemas.default_by_name(spec.value)
    if known is None:
        logger.debug("Schema %r is not a default; using it as a hash", spec.value)
        return spec.value
    logger.debug("Resolving default schema %r", spec.value)
    return schemas.add(known).hash


async def resolve_schema_async(
    schemas: AsyncSchemasNamespace, spec: SchemaSpec | None
) -> str:
    """Async twin of :func:`resolve_schema`."""
    if spec is None:
        return ""
    if isinstance(spec, InlineSchema):
        return (await schemas.add(spec.body)).hash

    known = schemas.default_by_name(spec.value)
    if known is None:
        logger.debug("Schema %r is not a default; using it as a hash", spec.value)
        return spec.value
    logger.debug("Resolving default schema %r", spec.value)
    return (await schemas.add(known)).hash


# ---------------------------------------------------------------------------
# Sync namespaces
# ---------------------------------------------------------------------------


class SchemasNamespace:
    """Thread schema endpoints."""

    def __init__(self, transport: SyncTransport) -> None:
        self._t = transport

    def add(self, schema: dict[str, Any]) -> FileIndex:
        """Store a schema and return its file index."""
        response = self._t._post("mills/schema", json=schema)
        return FileIndex.model_validate(response.json())

    def defaults(self) -> dict[str, dict[str, Any]]:
        """Return the built-in schemas keyed by name."""
        return copy.deepcopy(DEFAULT_SCHEMAS)

    def default_by_name(self, name: str) -> Optional[dict[str, Any]]:
        """Return the built-in schema called ``name``, or ``None``."""
        return default_schema(name)


class ThreadsNamespace:
    """Thread endpoints.

    Threads are distributed sets of encrypted files between peers,
    governed by built-in or custom schemas. See :mod:`textile_client.models`
    for what thread type and sharing allow.
    """

    def __init__(self, transport: SyncTransport, schemas: SchemasNamespace) -> None:
        self._t = transport
        self._schemas = schemas

    def add(
        self,
        name: str,
        schema: SchemaSpec | None = None,
        key: str | None = None,
        type: ThreadType | str | None = None,
        sharing: ThreadSharing | str | None = None,
        whitelist: list[str] | None = None,
    ) -> Thread:
        """Add and join a new thread.

        Args:
            name: Name of the new thread.
            schema: Inline schema, default schema name or schema hash.
            key: Locally unique key an app uses to find the thread on
                recovery.
            type: Access type, ``private`` by default.
            sharing: Sharing style, ``not_shared`` by default.
            whitelist: Contact addresses. When given, the thread will not
                allow additional peers.

        Returns:
            The newly created thread.
        """
        schema_hash = resolve_schema(self._schemas, schema)
        response = self._t._post(
            "threads",
            args=[name],
            opts=_add_opts(schema_hash, key, type, sharing, whitelist),
        )
        return Thread.model_validate(response.json())

    def add_or_update(self, thread_id: str, info: Thread) -> None:
        """Write a thread directly, usually when restoring a backup.

        Nothing is read back from the daemon.
        """
        self._t._put(_thread_path(thread_id), json=info.to_wire())

    def get(self, thread_id: str) -> Thread:
        """Get a thread by ID."""
        return Thread.model_validate(self._t._get(_thread_path(thread_id)).json())

    def get_by_key(self, key: str) -> Optional[Thread]:
        """Get the first thread whose key is ``key``, or ``None``."""
        return next((t for t in self.list().items if t.key == key), None)

    def get_by_name(self, name: str) -> List[Thread]:
        """Get all threads named ``name``, in list order."""
        return [t for t in self.list().items if t.name == name]

    def list(self) -> ThreadList:
        """List all local threads."""
        return ThreadList.model_validate(self._t._get("threads").json())

    def remove(self, thread_id: str) -> bool:
        """Leave and remove a thread. ``True`` if the daemon answered 204."""
        response = self._t._delete(_thread_path(thread_id), check=False)
        return response.status_code == NO_CONTENT

    def remove_by_key(self, key: str) -> bool:
        """Leave and remove the thread with key ``key``.

        Returns ``False`` without a delete request when no thread has that key.
        """
        thread = self.get_by_key(key)
        if thread is None:
            return False
        return self.remove(thread.id)

    def rename(self, thread_id: str, name: str) -> bool:
        """Rename a thread. Only the initiator may; the daemon decides."""
        response = self._t._put(_thread_path(thread_id, "name"), args=[name], check=False)
        return response.status_code == NO_CONTENT

    def peers(self, thread_id: str | None = None) -> ContactList:
        """List contacts in a thread (the ``default`` thread if none given)."""
        path = _thread_path(thread_id or DEFAULT_THREAD, "peers")
        return ContactList.model_validate(self._t._get(path).json())


# ---------------------------------------------------------------------------
# Async namespaces
# ---------------------------------------------------------------------------


class AsyncSchemasNamespace:
    """Async thread schema endpoints."""

    def __init__(self, transport: AsyncTransport) -> None:
        self._t = transport

    async def add(self, schema: dict[str, Any]) -> FileIndex:
        """Store a schema and return its file index."""
        response = await self._t._post("mills/schema", json=schema)
        return FileIndex.model_validate(response.json())

    def defaults(self) -> dict[str, dict[str, Any]]:
        """Return the built-in schemas keyed by name."""
        return copy.deepcopy(DEFAULT_SCHEMAS)

    def default_by_name(self, name: str) -> Optional[dict[str, Any]]:
        """Return the built-in schema called ``name``, or ``None``."""
        return default_schema(name)


class AsyncThreadsNamespace:
    """Async thread endpoints."""

    def __init__(
        self, transport: AsyncTransport, schemas: AsyncSchemasNamespace
    ) -> None:
        self._t = transport
        self._schemas = schemas
        self._pending: set[asyncio.Task[None]] = set()

    async def add(
        self,
        name: str,
        schema: SchemaSpec | None = None,
        key: str | None = None,
        type: ThreadType | str | None = None,
        sharing: ThreadSharing | str | None = None,
        whitelist: list[str] | None = None,
    ) -> Thread:
        """Add and join a new thread."""
        schema_hash = await resolve_schema_async(self._schemas, schema)
        response = await self._t._post(
            "threads",
            args=[name],
            opts=_add_opts(schema_hash, key, type, sharing, whitelist),
        )
        return Thread.model_validate(response.json())

    def add_or_update(self, thread_id: str, info: Thread) -> asyncio.Task[None]:
        """Schedule a direct thread write, usually when restoring a backup.

        Must be called from a running event loop. The write is started on
        the call, without awaiting; the returned task may be awaited for the
        outcome or ignored. Every failed write is logged, whether or not the
        task is awaited. :meth:`drain` waits for all outstanding writes.
        """
        task = asyncio.get_running_loop().create_task(
            self._write(_thread_path(thread_id), info)
        )
        self._pending.add(task)
        task.add_done_callback(self._write_done)
        return task

    async def _write(self, path: str, info: Thread) -> None:
        await self._t._put(path, json=info.to_wire())

    def _write_done(self, task: asyncio.Task[None]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning("Background thread write failed: %s", exc)

    async def drain(self) -> None:
        """Wait for every scheduled ``add_or_update`` write to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def get(self, thread_id: str) -> Thread:
        """Get a thread by ID."""
        response = await self._t._get(_thread_path(thread_id))
        return Thread.model_validate(response.json())

    async def get_by_key(self, key: str) -> Optional[Thread]:
        """Get the first thread whose key is ``key``, or ``None``."""
        threads = await self.list()
        return next((t for t in threads.items if t.key == key), None)

    async def get_by_name(self, name: str) -> List[Thread]:
        """Get all threads named ``name``, in list order."""
        threads = await self.list()
        return [t for t in threads.items if t.name == name]

    async def list(self) -> ThreadList:
        """List all local threads."""
        response = await self._t._get("threads")
        return ThreadList.model_validate(response.json())

    async def remove(self, thread_id: str) -> bool:
        """Leave and remove a thread. ``True`` if the daemon answered 204."""
        response = await self._t._delete(_thread_path(thread_id), check=False)
        return response.status_code == NO_CONTENT

    async def remove_by_key(self, key: str) -> bool:
        """Leave and remove the thread with key ``key``."""
        thread = await self.get_by_key(key)
        if thread is None:
            return False
        return await self.remove(thread.id)

    async def rename(self, thread_id: str, name: str) -> bool:
        """Rename a thread. ``True`` if the daemon answered 204."""
        response = await self._t._put(
            _thread_path(thread_id, "name"), args=[name], check=False
        )
        return response.status_code == NO_CONTENT

    async def peers(self, thread_id: str | None = None) -> ContactList:
        """List contacts in a thread (the ``default`` thread if none given)."""
        path = _thread_path(thread_id or DEFAULT_THREAD, "peers")
        response = await self._t._get(path)
        return ContactList.model_validate(response.json())
