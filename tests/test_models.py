"""Tests for the generic wire mapping in models.base and the domain models."""

import dataclasses
import importlib
import inspect
import typing

import pytest

from models.base import UNSET, ForgeModel, ModelCollection, ModelError, wire_name
from models.account import RegionCollection
from models.database import CreateDatabase
from models.server import Server, ServerCollection, UpdateServer
from models.site import Site
from models.site_rules import CreateRedirectRule, RedirectRule

MODEL_MODULES = ("account", "backup", "certificate", "database", "process", "recipe",
                 "security", "server", "site", "site_rules")


def _model_classes():
    for module_name in MODEL_MODULES:
        module = importlib.import_module(f"models.{module_name}")
        for _, cls in inspect.getmembers(module, inspect.isclass):
            if issubclass(cls, ForgeModel) and cls is not ForgeModel and cls.__module__ == module.__name__:
                yield cls


def _sample(hint):
    if hint is typing.Any:
        return "value"
    if typing.get_origin(hint) is typing.Union:
        return _sample(next(arg for arg in typing.get_args(hint) if arg is not type(None)))
    origin = typing.get_origin(hint) or hint
    if origin is list:
        return [{"id": 1}] if typing.get_args(hint) and typing.get_args(hint)[0] is not int else [1, 2]
    if origin is dict:
        return {"key": "value"}
    return {bool: True, int: 7, float: 1.5, str: "value"}[origin]


@pytest.mark.parametrize("cls", list(_model_classes()), ids=lambda cls: cls.__name__)
def test_every_declared_field_survives_the_wire(cls):
    hints = typing.get_type_hints(cls)
    data = {wire_name(f): _sample(hints[f.name]) for f in dataclasses.fields(cls)}
    assert cls.from_wire(data).to_wire() == data


class TestForgeModel:
    def test_unknown_keys_are_ignored(self):
        server = Server.from_wire({"id": 1, "name": "web", "unexpected": True})
        assert server.name == "web"
        assert "unexpected" not in server.to_wire()

    def test_missing_required_field(self):
        with pytest.raises(ModelError, match="missing required field 'id'"):
            Server.from_wire({"name": "web"})

    def test_null_required_field(self):
        with pytest.raises(ModelError, match="must not be null"):
            Server.from_wire({"id": None})

    def test_scalar_coercion(self):
        server = Server.from_wire({"id": "12", "is_ready": "true", "ssh_port": "22"})
        assert server.id == 12
        assert server.is_ready is True
        assert server.ssh_port == 22

    def test_bad_scalar(self):
        with pytest.raises(ModelError, match="Server.id"):
            Server.from_wire({"id": "twelve"})

    def test_fractional_float_is_not_truncated(self):
        with pytest.raises(ModelError, match="Server.ssh_port"):
            Server.from_wire({"id": 1, "ssh_port": 7.9})

    def test_integral_float_becomes_int(self):
        server = Server.from_wire({"id": 7.0})
        assert server.id == 7
        assert type(server.id) is int

    def test_numeric_chat_id_keeps_its_type(self):
        site = Site.from_wire({"id": 1, "telegram_chat_id": 123})
        assert site.telegram_chat_id == 123
        assert site.to_wire()["telegram_chat_id"] == 123
        assert Site.from_wire({"id": 1, "telegram_chat_id": "-100123"}).telegram_chat_id == "-100123"

    def test_object_for_string_field(self):
        with pytest.raises(ModelError, match="Server.name"):
            Server.from_wire({"id": 1, "name": {"first": "web"}})

    def test_list_shape_is_checked(self):
        with pytest.raises(ModelError, match="expected a list"):
            Server.from_wire({"id": 1, "tags": "production"})

    def test_trailing_underscore_maps_to_keyword_key(self):
        rule = CreateRedirectRule.from_wire({"from": "/old", "to": "/new"})
        assert rule.from_ == "/old"
        assert rule.to_wire() == {"from": "/old", "to": "/new"}
        assert "from" in RedirectRule.wire_keys()


class TestUnsetFields:
    def test_absent_fields_are_omitted(self):
        assert UpdateServer.from_wire({"name": "web-2"}).to_wire() == {"name": "web-2"}

    def test_null_is_sent_explicitly(self):
        assert UpdateServer.from_wire({"name": None}).to_wire() == {"name": None}

    def test_empty_update(self):
        assert UpdateServer().to_wire() == {}

    def test_create_with_optional_fields_left_out(self):
        database = CreateDatabase.from_wire({"name": "mydb"})
        assert database.user is UNSET
        assert database.to_wire() == {"name": "mydb"}

    def test_unset_is_falsy_singleton(self):
        assert not UNSET
        assert type(UNSET)() is UNSET
        assert repr(UNSET) == "UNSET"


class TestModelCollection:
    def test_empty_collection(self):
        servers = ServerCollection.from_wire({"servers": []})
        assert servers.count == 0
        assert servers.to_dict() == {"count": 0, "servers": []}

    def test_missing_key_is_rejected(self):
        with pytest.raises(ModelError, match="expects a 'servers' key"):
            ServerCollection.from_wire({"data": [{"id": 1}]})

    def test_null_under_key_reads_as_empty(self):
        assert ServerCollection.from_wire({"servers": None}).count == 0

    def test_items_exposed_under_key(self):
        servers = ServerCollection.from_wire({"servers": [{"id": 1}, {"id": 2}]})
        assert [s.id for s in servers.servers] == [1, 2]
        assert len(servers) == 2
        assert servers[1].id == 2

    def test_context_is_merged_into_items(self):
        servers = ServerCollection.from_wire([{"id": 1}], context={"credential_id": 9})
        assert servers[0].credential_id == 9

    def test_non_object_item(self):
        with pytest.raises(ModelError, match="must be an object"):
            ServerCollection.from_wire({"servers": [1]})

    def test_non_list_payload(self):
        with pytest.raises(ModelError, match="expects a list"):
            ServerCollection.from_wire({"servers": {"id": 1}})

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            ServerCollection().sites

    def test_is_a_model_collection(self):
        assert isinstance(ServerCollection(), ModelCollection)


def test_regions_are_flattened_by_provider():
    regions = RegionCollection.from_wire({"regions": {
        "ocean2": [{"id": "ams2", "name": "Amsterdam 2", "sizes": []}],
        "linode": [{"id": "us-east", "name": "Newark"}],
    }})
    assert regions.count == 2
    assert {(r.provider, r.id) for r in regions} == {("ocean2", "ams2"), ("linode", "us-east")}


def test_region_entry_must_be_an_object():
    with pytest.raises(ModelError, match="must be an object"):
        RegionCollection.from_wire({"regions": {"ocean2": ["ams2"]}})


def test_regions_missing_key():
    with pytest.raises(ModelError, match="expects a 'regions' key"):
        RegionCollection.from_wire({"providers": {}})
