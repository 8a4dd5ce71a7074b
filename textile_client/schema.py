"""Thread schema references and the daemon's built-in schemas."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class InlineSchema:
    """A schema given as its JSON body; stored on the daemon before use."""

    body: dict[str, Any]


@dataclass(frozen=True)
class SchemaRef:
    """A schema given by name.

    ``value`` is either the name of one of :data:`DEFAULT_SCHEMAS` or the
    content hash of a schema already stored on the daemon.
    """

    value: str


SchemaSpec = Union[InlineSchema, SchemaRef]


_IMAGE_RESIZE = "/image/resize"

DEFAULT_SCHEMAS: dict[str, dict[str, Any]] = {
    "blob": {
        "name": "blob",
        "mill": "/blob",
    },
    "camera_roll": {
        "name": "camera_roll",
        "pin": True,
        "links": {
            "raw": {
                "use": ":file",
                "mill": "/blob",
            },
            "exif": {
                "use": "raw",
                "mill": "/image/exif",
            },
            "thumb": {
                "use": "raw",
                "pin": True,
                "mill": _IMAGE_RESIZE,
                "opts": {"width": "320", "quality": "80"},
            },
        },
    },
    "media": {
        "name": "media",
        "pin": True,
        "links": {
            "large": {
                "use": ":file",
                "mill": _IMAGE_RESIZE,
                "opts": {"width": "800", "quality": "80"},
            },
            "small": {
                "use": ":file",
                "mill": _IMAGE_RESIZE,
                "opts": {"width": "320", "quality": "80"},
            },
            "thumb": {
                "use": "large",
                "pin": True,
                "mill": _IMAGE_RESIZE,
                "opts": {"width": "100", "quality": "80"},
            },
        },
    },
}


def default_schema(name: str) -> dict[str, Any] | None:
    """Return a copy of the built-in schema called ``name``, if any."""
    schema = DEFAULT_SCHEMAS.get(name)
    return copy.deepcopy(schema) if schema is not None else None
