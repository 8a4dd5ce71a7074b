"""Tests for records, schema helpers and configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from textile_client import (
    ApiOptions,
    ContactList,
    FileIndex,
    Thread,
    ThreadList,
    ThreadSharing,
    ThreadType,
)
from textile_client.config import DEFAULT_API_OPTIONS
from textile_client.namespaces import SchemasNamespace
from textile_client.schema import DEFAULT_SCHEMAS, default_schema


class TestThreadModel:
    """Verify decoding of daemon thread payloads."""

    def test_daemon_enum_names_normalised(self) -> None:
        thread = Thread.model_validate(
            {"id": "T1", "type": "READ_ONLY", "sharing": "INVITE_ONLY"}
        )
        assert thread.type is ThreadType.READ_ONLY
        assert thread.sharing is ThreadSharing.INVITE_ONLY

    def test_defaults(self) -> None:
        thread = Thread.model_validate({"id": "T1"})
        assert thread.type is ThreadType.PRIVATE
        assert thread.sharing is ThreadSharing.NOT_SHARED
        assert thread.whitelist == []
        assert thread.schema_hash == ""

    def test_null_whitelist(self) -> None:
        thread = Thread.model_validate({"id": "T1", "whitelist": None})
        assert thread.whitelist == []

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Thread.model_validate({"id": "T1", "type": "SECRET"})

    def test_missing_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Thread.model_validate({"name": "chat"})

    def test_to_wire_keeps_daemon_fields(self) -> None:
        thread = Thread.model_validate(
            {
                "id": "T1",
                "schema": "QmSchema",
                "type": "open",
                "sharing": "not_shared",
                "sk": "secret-key",
                "peer_count": 3,
            }
        )

        body = thread.to_wire()

        assert body["schema"] == "QmSchema"
        assert "schema_hash" not in body
        assert body["type"] == "OPEN"
        assert body["sharing"] == "NOT_SHARED"
        assert body["sk"] == "secret-key"
        assert body["peer_count"] == 3


class TestListModels:
    def test_thread_list_null_items(self) -> None:
        assert ThreadList.model_validate({"items": None}).items == []

    def test_contact_list(self) -> None:
        contacts = ContactList.model_validate(
            {
                "items": [
                    {
                        "address": "P1",
                        "name": "alice",
                        "peers": [{"id": "12D3"}],
                        "threads": ["T1"],
                    }
                ]
            }
        )
        assert contacts.items[0].peers == [{"id": "12D3"}]
        assert contacts.items[0].threads == ["T1"]

    def test_file_index_size_as_string(self) -> None:
        index = FileIndex.model_validate({"hash": "QmX", "size": "42"})
        assert index.size == 42


class TestDefaultSchemas:
    def test_known_names(self) -> None:
        assert set(DEFAULT_SCHEMAS) == {"blob", "camera_roll", "media"}

    def test_default_schema_is_a_copy(self) -> None:
        schema = default_schema("media")
        assert schema is not None
        schema["name"] = "changed"
        assert DEFAULT_SCHEMAS["media"]["name"] == "media"

    def test_unknown_default(self) -> None:
        assert default_schema("QmSomeHash") is None

    def test_namespace_defaults(self) -> None:
        schemas = SchemasNamespace(transport=None)  # type: ignore[arg-type]
        assert schemas.defaults() == DEFAULT_SCHEMAS
        assert schemas.default_by_name("blob") == DEFAULT_SCHEMAS["blob"]
        assert schemas.default_by_name("nope") is None


class TestApiOptions:
    def test_default_base_url(self) -> None:
        assert DEFAULT_API_OPTIONS.base_url == "http://127.0.0.1:40600/api/v0"

    def test_without_port(self) -> None:
        options = ApiOptions(url="https://textile.example/", port=None, version=1)
        assert options.base_url == "https://textile.example/api/v1"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEXTILE_API_URL", "http://10.0.0.2")
        monkeypatch.setenv("TEXTILE_API_PORT", "40601")
        monkeypatch.setenv("TEXTILE_API_VERSION", "1")
        monkeypatch.setenv("TEXTILE_API_TIMEOUT", "2.5")

        options = ApiOptions.from_env()

        assert options.base_url == "http://10.0.0.2:40601/api/v1"
        assert options.timeout == 2.5

    def test_from_env_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "TEXTILE_API_URL",
            "TEXTILE_API_PORT",
            "TEXTILE_API_VERSION",
            "TEXTILE_API_TIMEOUT",
        ):
            monkeypatch.delenv(name, raising=False)

        assert ApiOptions.from_env() == DEFAULT_API_OPTIONS

    def test_from_env_empty_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEXTILE_API_URL", "http://daemon")
        monkeypatch.setenv("TEXTILE_API_PORT", "")

        assert ApiOptions.from_env().base_url.startswith("http://daemon/api/v")
