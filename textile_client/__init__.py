"""Textile daemon Python client.

Provides synchronous and asynchronous clients for the threads API of a
local Textile peer-to-peer daemon.

Quick start::

    from textile_client import SchemaRef, TextileClient

    client = TextileClient()
    thread = client.threads.add("chat", schema=SchemaRef("media"))
    print(client.threads.get(thread.id))

For async usage::

    from textile_client import AsyncTextileClient

    async def main():
        async with AsyncTextileClient() as client:
            threads = await client.threads.list()
"""

from __future__ import annotations

from textile_client.async_client import AsyncTextileClient
from textile_client.client import TextileClient
from textile_client.config import DEFAULT_API_OPTIONS, ApiOptions
from textile_client.exceptions import TextileConnectionError, TextileError
from textile_client.models import (
    Contact,
    ContactList,
    FileIndex,
    Thread,
    ThreadList,
    ThreadSharing,
    ThreadType,
)
from textile_client.schema import InlineSchema, SchemaRef

__all__ = [
    "ApiOptions",
    "AsyncTextileClient",
    "Contact",
    "ContactList",
    "DEFAULT_API_OPTIONS",
    "FileIndex",
    "InlineSchema",
    "SchemaRef",
    "TextileClient",
    "TextileConnectionError",
    "TextileError",
    "Thread",
    "ThreadList",
    "ThreadSharing",
    "ThreadType",
]

__version__ = "0.1.0"
