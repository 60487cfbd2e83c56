"""Tests for the declarative Forge tools: validation, call mapping and envelopes."""

import asyncio
import string as _string

import pytest
from jsonschema import validators

from api.exceptions import ForgeAPIError
from models.database import CreateDatabase, Database
from models.server import Server, ServerCollection, UpdateServer
from tools.base_tool import ToolValidationError
from tools.operation_tool import OperationTool
from tools.registry import OPERATION_TABLES
from tests.helpers import payload, sample_arguments

OPERATIONS = [(category, op) for category, module in OPERATION_TABLES for op in module.OPERATIONS]
WITH_REQUIRED = [(category, op) for category, op in OPERATIONS if any(p.required for p in op.all_params)]


def _op_id(value):
    return value.name if hasattr(value, "name") else value


def _facade(client, op):
    facade, method = op.call.split(".", 1)
    return getattr(getattr(client, facade), method)


def run(tool, arguments):
    return asyncio.run(tool.run(arguments))


class TestRegistration:
    def test_tool_names(self, registry):
        names = registry.get_tool_names()
        assert len(names) == len(set(names))
        assert all(name.endswith("-tool") for name in names)

    def test_every_schema_is_valid_json_schema(self, registry):
        for tool in registry.tools.values():
            schema = tool.get_schema()
            validators.validator_for(schema).check_schema(schema)
            assert schema["type"] == "object"

    def test_every_call_targets_a_facade_method(self, forge):
        for _, op in OPERATIONS:
            assert callable(_facade(forge, op)), op.call

    def test_messages_only_reference_required_arguments(self):
        for _, op in OPERATIONS:
            if not op.message:
                continue
            fields = {name for _, name, _, _ in _string.Formatter().parse(op.message) if name}
            required = {p.name for p in op.all_params if p.required}
            assert fields <= required, op.name

    def test_annotations(self, registry):
        listing = registry.tools["list-servers-tool"].get_annotations()
        assert listing.readOnlyHint is True
        assert listing.destructiveHint is False

        deletion = registry.tools["delete-server-tool"].get_annotations()
        assert deletion.destructiveHint is True
        assert deletion.readOnlyHint is False

        assert registry.tools["run-recipe-tool"].destructive is True
        assert registry.tools["restore-backup-tool"].destructive is True


@pytest.mark.parametrize("category, op", WITH_REQUIRED, ids=_op_id)
def test_missing_required_argument_is_rejected(fake_client, category, op):
    tool = OperationTool(op, fake_client, category)
    arguments = sample_arguments(tool.get_schema())
    arguments.pop(tool.get_schema()["required"][-1])

    with pytest.raises(ToolValidationError):
        run(tool, arguments)
    _facade(fake_client, op).assert_not_awaited()


@pytest.mark.parametrize("category, op", OPERATIONS, ids=_op_id)
def test_minimal_arguments_reach_the_facade(fake_client, category, op):
    tool = OperationTool(op, fake_client, category)
    facade = _facade(fake_client, op)
    facade.return_value = None

    result = payload(run(tool, sample_arguments(tool.get_schema())))

    assert result["success"] is True, result
    assert result["message"]
    facade.assert_awaited_once()


@pytest.mark.parametrize("category, op", OPERATIONS, ids=_op_id)
def test_upstream_failure_becomes_error_envelope(fake_client, category, op):
    tool = OperationTool(op, fake_client, category)
    _facade(fake_client, op).side_effect = ForgeAPIError("Upstream exploded", 500)

    assert payload(run(tool, sample_arguments(tool.get_schema()))) == {
        "success": False, "error": "Upstream exploded",
    }


class TestEnvelopes:
    def test_empty_server_list(self, registry, fake_client):
        fake_client.servers.list.return_value = ServerCollection()
        result = payload(run(registry.tools["list-servers-tool"], {}))
        assert result == {"success": True, "count": 0, "servers": []}

    def test_get_server(self, registry, fake_client):
        fake_client.servers.get.return_value = Server(id=1, name="test-server", ip_address="192.168.1.1")
        result = run(registry.tools["get-server-tool"], {"server_id": 1})

        assert "test-server" in result[0].text
        assert "192.168.1.1" in result[0].text
        assert payload(result)["success"] is True
        fake_client.servers.get.assert_awaited_once_with(1)

    def test_create_database_without_user(self, registry, fake_client):
        fake_client.databases.create.return_value = Database(id=3, server_id=1, name="mydb")
        result = payload(run(registry.tools["create-database-tool"], {"server_id": 1, "name": "mydb"}))

        assert result["success"] is True
        assert result["name"] == "mydb"
        assert result["message"] == "Database created."
        fake_client.databases.create.assert_awaited_once_with(1, CreateDatabase(name="mydb"))

    def test_certificate_failure(self, registry, fake_client):
        fake_client.certificates.obtain_lets_encrypt.side_effect = ForgeAPIError("DNS validation failed")
        result = payload(run(registry.tools["obtain-lets-encrypt-certificate-tool"],
                             {"server_id": 1, "site_id": 2, "domains": ["example.com"]}))
        assert result == {"success": False, "error": "DNS validation failed"}

    def test_text_result_lands_under_key(self, registry, fake_client):
        fake_client.sites.deployment_log.return_value = "Deploying...\nDone."
        result = payload(run(registry.tools["get-deployment-log-tool"], {"server_id": 1, "site_id": 2}))
        assert result == {"success": True, "log": "Deploying...\nDone."}

    def test_side_effect_reports_message_and_ids(self, registry, fake_client):
        fake_client.sites.deploy.return_value = None
        result = payload(run(registry.tools["deploy-site-tool"], {"server_id": 1, "site_id": 2}))
        assert result == {
            "success": True,
            "message": "Deployment of site 2 triggered.",
            "server_id": 1,
            "site_id": 2,
        }

    def test_list_result_is_counted(self, registry, fake_client):
        fake_client.sites.list_aliases.return_value = ["www.example.com"]
        result = payload(run(registry.tools["list-aliases-tool"], {"server_id": 1, "site_id": 2}))
        assert result == {"success": True, "count": 1, "aliases": ["www.example.com"]}


class TestCallMapping:
    def test_parameter_default_is_forwarded(self, registry, fake_client):
        fake_client.servers.get_log.return_value = ""
        run(registry.tools["get-server-log-tool"], {"server_id": 4})
        fake_client.servers.get_log.assert_awaited_once_with(4, file="auth")

    def test_null_clears_field_on_update(self, registry, fake_client):
        fake_client.servers.update.return_value = Server(id=1)
        run(registry.tools["update-server-tool"], {"server_id": 1, "name": None})

        (server_id, data), _ = fake_client.servers.update.await_args
        assert server_id == 1
        assert data == UpdateServer(name=None)
        assert data.to_wire() == {"name": None}

    def test_omitted_update_fields_are_not_sent(self, registry, fake_client):
        fake_client.servers.update.return_value = Server(id=1)
        run(registry.tools["update-server-tool"], {"server_id": 1, "max_upload_size": 64})
        (_, data), _ = fake_client.servers.update.await_args
        assert data.to_wire() == {"max_upload_size": 64}

    def test_redirect_rule_from_argument(self, registry, fake_client):
        fake_client.redirect_rules.create.return_value = None
        run(registry.tools["create-redirect-rule-tool"],
            {"server_id": 1, "site_id": 2, "from": "/old", "to": "https://example.com/new"})
        (_, _, data), _ = fake_client.redirect_rules.create.await_args
        assert data.to_wire() == {"from": "/old", "to": "https://example.com/new"}

    def test_integration_is_fixed_per_tool(self, registry, fake_client):
        fake_client.integrations.enable.return_value = None
        result = payload(run(registry.tools["enable-horizon-tool"], {"server_id": 1, "site_id": 2}))

        fake_client.integrations.enable.assert_awaited_once_with(1, 2, integration="horizon")
        assert result["message"] == "Horizon enabled for site 2."

    def test_scheduler_integration_names(self, registry):
        for name in ("get-scheduler-integration-tool", "enable-scheduler-tool", "disable-scheduler-tool",
                     "get-maintenance-integration-tool", "enable-maintenance-tool", "disable-maintenance-tool"):
            assert name in registry.tools

    def test_octane_defaults(self, registry, fake_client):
        fake_client.integrations.enable_octane.return_value = None
        run(registry.tools["enable-octane-tool"], {"server_id": 1, "site_id": 2})
        fake_client.integrations.enable_octane.assert_awaited_once_with(1, 2, server="swoole", workers="auto")

    def test_service_control(self, registry, fake_client):
        fake_client.services.restart_service.return_value = None
        result = payload(run(registry.tools["restart-service-tool"], {"server_id": 1, "service": "redis"}))
        fake_client.services.restart_service.assert_awaited_once_with(1, service="redis")
        assert result["message"] == "Service redis restarting on server 1."


class TestValidation:
    def test_unknown_argument(self, registry, fake_client):
        with pytest.raises(ToolValidationError, match="get-server-tool"):
            run(registry.tools["get-server-tool"], {"server_id": 1, "verbose": True})
        fake_client.servers.get.assert_not_awaited()

    @pytest.mark.parametrize("server_id", ["one", 0, -3, 1.5])
    def test_bad_identifier(self, registry, server_id):
        with pytest.raises(ToolValidationError) as excinfo:
            run(registry.tools["get-server-tool"], {"server_id": server_id})
        assert excinfo.value.path == "server_id"

    def test_integral_float_identifier_is_passed_as_int(self, registry, fake_client):
        fake_client.sites.get.return_value = None
        result = payload(run(registry.tools["get-site-tool"], {"server_id": 1.0, "site_id": 2.0}))
        fake_client.sites.get.assert_awaited_once_with(1, 2)
        args, _ = fake_client.sites.get.await_args
        assert [type(arg) for arg in args] == [int, int]
        assert type(result["site_id"]) is int
        assert result["success"] is True

    def test_enum(self, registry):
        with pytest.raises(ToolValidationError, match="project_type"):
            run(registry.tools["create-site-tool"],
                {"server_id": 1, "domain": "example.com", "project_type": "rails"})

    def test_empty_domain_list(self, registry):
        with pytest.raises(ToolValidationError):
            run(registry.tools["obtain-lets-encrypt-certificate-tool"],
                {"server_id": 1, "site_id": 2, "domains": []})

    def test_arguments_may_be_none(self, registry, fake_client):
        fake_client.account.user.return_value = None
        assert payload(run(registry.tools["get-user-tool"], None))["success"] is True


class TestRegistryDispatch:
    def test_unknown_tool(self, registry):
        result = payload(asyncio.run(registry.execute_tool("no-such-tool", {})))
        assert result == {"success": False, "error": "Unknown tool: no-such-tool"}

    def test_validation_error_propagates(self, registry):
        with pytest.raises(ToolValidationError):
            asyncio.run(registry.execute_tool("get-server-tool", {}))

    def test_duplicate_registration(self, registry, fake_client):
        tool = registry.tools["get-server-tool"]
        with pytest.raises(ValueError, match="already registered"):
            registry.register_tool(tool)

    def test_stats(self, registry):
        stats = registry.get_tool_stats()
        assert stats["total_tools"] == len(registry.tools)
        assert "composite" in stats["categories"]
        assert stats["categories"]["servers"]["count"] == len(OPERATION_TABLES[0][1].OPERATIONS)
        assert 0 < stats["destructive"] < stats["total_tools"]
