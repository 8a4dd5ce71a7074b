"""
Typed records returned by the Textile daemon.

Thread type controls read (R), annotate (A) and write (W) access:

    private   --> initiator: RAW, whitelist:
    read_only --> initiator: RAW, whitelist: R
    public    --> initiator: RAW, whitelist: RA
    open      --> initiator: RAW, whitelist: RAW

Thread sharing controls whether (Y/N) a thread can be shared onwards:

    not_shared  --> initiator: N, whitelist: N
    invite_only --> initiator: Y, whitelist: N
    shared      --> initiator: Y, whitelist: Y

The daemon enforces both; these records only describe them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ThreadType(str, Enum):
    """Access-control class of a thread."""
    PRIVATE = "private"
    READ_ONLY = "read_only"
    PUBLIC = "public"
    OPEN = "open"


class ThreadSharing(str, Enum):
    """Re-shareability class of a thread."""
    NOT_SHARED = "not_shared"
    INVITE_ONLY = "invite_only"
    SHARED = "shared"


class Thread(BaseModel):
    """
    A named, access-controlled set of files shared between peers.

    The daemon owns the canonical record; instances are snapshots of one
    response. Fields the daemon adds beyond these are kept as extras so a
    thread read from one daemon can be written back with ``add_or_update``.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    key: str = ""
    name: str = ""
    schema_hash: str = Field("", alias="schema")
    initiator: str = ""
    type: ThreadType = ThreadType.PRIVATE
    sharing: ThreadSharing = ThreadSharing.NOT_SHARED
    whitelist: List[str] = Field(default_factory=list)
    state: str = ""
    head: str = ""
    peer_count: int = 0
    block_count: int = 0

    @field_validator("type", "sharing", mode="before")
    @classmethod
    def normalise_enum(cls, value: Any) -> Any:
        # daemon emits protobuf enum names, e.g. READ_ONLY
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator("whitelist", mode="before")
    @classmethod
    def none_whitelist(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_wire(self) -> Dict[str, Any]:
        """Render the JSON body the daemon accepts for ``PUT threads/{id}``."""
        body = self.model_dump(mode="json", by_alias=True)
        body["type"] = self.type.name
        body["sharing"] = self.sharing.name
        return body


class ThreadList(BaseModel):
    items: List[Thread] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def none_items(cls, value: Any) -> Any:
        return [] if value is None else value


class Contact(BaseModel):
    """A peer identity and the devices (peers) behind it."""
    model_config = ConfigDict(extra="allow")

    address: str
    name: str = ""
    avatar: str = ""
    peers: List[Dict[str, Any]] = Field(default_factory=list)
    threads: List[str] = Field(default_factory=list)


class ContactList(BaseModel):
    items: List[Contact] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def none_items(cls, value: Any) -> Any:
        return [] if value is None else value


class FileIndex(BaseModel):
    """
    Index entry for content stored by a mill.

    Returned when a schema is stored; ``hash`` is its content address.
    """
    model_config = ConfigDict(extra="allow")

    hash: str
    mill: str = ""
    checksum: str = ""
    source: str = ""
    opts: str = ""
    key: str = ""
    media: str = ""
    name: str = ""
    size: int = 0
    added: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None
    targets: List[str] = Field(default_factory=list)
