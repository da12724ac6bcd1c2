"""Tests for ConfigClient, including type checks on config values."""

import pytest

from ecsm_client import errors
from ecsm_client.clientset.config_types import ConfigItem, CreateConfigRequest, ListConfigsOptions
from ecsm_client.clientset.validation import NumberValue

# ---------------------------------------------------------------------------
# Create / update
# ---------------------------------------------------------------------------


@pytest.fixture
def configs(clientset):
    return clientset.configs()


def test_create_number_is_sent(server, configs):
    configs.create(CreateConfigRequest(key="threshold", type="number", value=123.45))

    assert server.last.method == "POST"
    assert server.last.url.path == "/api/v1/configmap"
    assert server.last_json() == {"key": "threshold", "type": "number", "value": 123.45}


def test_create_number_given_as_string_rejected_locally(server, configs):
    with pytest.raises(errors.ValidationError, match="type mismatch"):
        configs.create(CreateConfigRequest(key="threshold", type="number", value="123"))
    assert server.requests == []


def test_create_json_object(server, configs):
    value = {"user": "admin", "roles": ["ops"]}

    configs.create(CreateConfigRequest(key="auth", type="json", value=value))

    assert server.last_json()["value"] == value


def test_create_unsupported_type_rejected_locally(server, configs):
    with pytest.raises(errors.ValidationError, match="unsupported config type"):
        configs.create(CreateConfigRequest(key="flag", type="boolean", value=True))
    assert server.requests == []


def test_update_requires_id(server, configs):
    with pytest.raises(errors.ValidationError, match="ID is required"):
        configs.update(ConfigItem(key="a", type="string", value="x"))
    assert server.requests == []


def test_update_checks_value_type(server, configs):
    with pytest.raises(errors.ValidationError):
        configs.update(ConfigItem(id="c1", key="a", type="string", value=5))
    assert server.requests == []


def test_update_puts_item(server, configs):
    configs.update(ConfigItem(id="c1", key="a", type="string", value="x"))

    assert server.last.method == "PUT"
    assert server.last_json() == {"id": "c1", "key": "a", "type": "string", "value": "x"}


def test_delete(server, configs):
    configs.delete("c1")

    assert server.last.method == "DELETE"
    assert server.last.url.path == "/api/v1/configmap/c1"


def test_get_returns_decoded_value(server, configs):
    server.reply({"level": 3})

    assert configs.get("logging") == {"level": 3}
    assert server.last.url.path == "/api/v1/configmap/key"
    assert server.last.url.params["key"] == "logging"


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------


def test_list_wraps_bare_array_without_total(server, configs):
    server.reply([{"id": "c1", "key": "a", "type": "number", "value": 1}])

    page = configs.list(ListConfigsOptions(page_size=10, key="a"))

    assert page.total is None
    assert page.page_size == 10
    assert server.last.url.params["key"] == "a"
    assert page.items[0].typed_value() == NumberValue(1)


def test_list_null_data_is_empty(server, configs):
    server.reply(None)

    assert configs.list(ListConfigsOptions()).items == []


def test_list_all_stops_on_short_page(server, configs):
    items = [{"id": f"c{i}", "key": f"k{i}", "type": "string", "value": "v"} for i in range(5)]
    server.serve_pages(items, bare=True)

    result = configs.list_all(ListConfigsOptions(page_size=2))

    assert [c.id for c in result] == ["c0", "c1", "c2", "c3", "c4"]
    assert len(server.requests) == 3


def test_list_all_exact_multiple_needs_empty_page(server, configs):
    items = [{"id": f"c{i}"} for i in range(4)]
    server.serve_pages(items, bare=True)

    result = configs.list_all(ListConfigsOptions(page_size=2))

    assert len(result) == 4
    assert len(server.requests) == 3


def test_typed_value_rejects_stored_mismatch():
    item = ConfigItem(id="c1", key="a", type="json", value="not-json")

    with pytest.raises(errors.ValidationError):
        item.typed_value()
