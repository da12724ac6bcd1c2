"""Tests for ServiceClient against the fake ECSM server."""

import pytest

from ecsm_client import errors
from ecsm_client.clientset import Clientset, service_types
from ecsm_client.clientset.common_types import (
    CPU,
    EcsImageConfig,
    Memory,
    NodeSpec,
    Process,
    Resources,
    SylixOS,
)


def _create_request(name: str) -> service_types.CreateServiceRequest:
    return service_types.CreateServiceRequest(
        name=name,
        image=service_types.ImageSpec(
            ref="test-image@1.0.0#sylixos",
            action="run",
            config=EcsImageConfig(
                process=Process(cwd="/"),
                sylixos=SylixOS(
                    resources=Resources(
                        cpu=CPU(highest_prio=200, lowest_prio=255),
                        memory=Memory(kheap_limit=1024, memory_limit_mb=512),
                    ),
                ),
            ),
        ),
        node=NodeSpec(names=["worker2"]),
        factor=1,
        policy="static",
        prepull=False,
    )


@pytest.fixture
def services(clientset: Clientset):
    return clientset.services()


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------


def test_create_posts_camel_case_body(server, services):
    server.reply({"id": "svc-1", "name": "web"})

    resp = services.create(_create_request("web"))

    assert resp.id == "svc-1"
    assert server.last.method == "POST"
    assert server.last.url.path == "/api/v1/service"
    body = server.last_json()
    assert body["node"] == {"names": ["worker2"]}
    assert body["image"]["config"]["sylixos"]["resources"]["memory"] == {
        "kheapLimit": 1024,
        "memoryLimitMB": 512,
    }
    assert body["prepull"] is False


def test_get_addresses_service_by_id(server, services):
    server.reply({"id": "svc-1", "name": "web", "status": "running", "createdTime": "t0"})

    svc = services.get("svc-1")

    assert server.last.url.path == "/api/v1/service/svc-1"
    assert svc.status == "running"
    assert svc.created_time == "t0"


def test_update_identity_mismatch_fails_before_network(server, services):
    req = service_types.UpdateServiceRequest(id="svc-2", **_create_request("web").model_dump())

    with pytest.raises(errors.ValidationError) as exc_info:
        services.update("svc-1", req)

    assert "svc-1" in str(exc_info.value)
    assert "svc-2" in str(exc_info.value)
    assert server.requests == []


def test_update_puts_whole_service(server, services):
    server.reply({"id": "svc-1"})
    req = service_types.UpdateServiceRequest(id="svc-1", **_create_request("web").model_dump())

    services.update("svc-1", req)

    assert server.last.method == "PUT"
    assert server.last.url.path == "/api/v1/service"
    assert server.last_json()["id"] == "svc-1"


def test_delete(server, services):
    server.reply({"id": "svc-1", "transactionId": "tx-1"})

    resp = services.delete("svc-1")

    assert server.last.method == "DELETE"
    assert server.last.url.path == "/api/v1/service/svc-1"
    assert resp.transaction_id == "tx-1"


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------


def test_list_omits_empty_filters(server, services):
    server.reply({"total": 0, "pageNum": 1, "pageSize": 10, "list": []})

    services.list(service_types.ListServicesOptions(page_num=1, page_size=10, node_id="n1"))

    assert dict(server.last.url.params) == {"pageNum": "1", "pageSize": "10", "nodeId": "n1"}


def test_list_maps_image_filter_to_id(server, services):
    server.reply({"total": 0, "list": []})

    services.list(service_types.ListServicesOptions(image_id="img-1"))

    assert server.last.url.params["id"] == "img-1"


def test_list_all_five_items_in_three_pages(server, services):
    """pageSize=2 over five services: pages of 2, 2, 1."""
    rows = [{"id": f"svc-{i}", "name": f"web-{i}"} for i in range(5)]
    server.serve_pages(rows)

    result = services.list_all(service_types.ListServicesOptions(page_size=2, name="web"))

    assert [r.id for r in result] == [f"svc-{i}" for i in range(5)]
    assert len(server.requests) == 3
    assert [r.url.params["pageNum"] for r in server.requests] == ["1", "2", "3"]
    assert {r.url.params["name"] for r in server.requests} == {"web"}


def test_list_all_remote_error_returns_nothing(server, services):
    rows = [{"id": f"svc-{i}"} for i in range(4)]
    server.reply({"total": 4, "list": rows[:2]})
    server.reply_raw(500, json={"message": "db down"})

    with pytest.raises(errors.RemoteError, match="db down"):
        services.list_all(service_types.ListServicesOptions(page_size=2))


# ---------------------------------------------------------------------------
# Batch operations
# ---------------------------------------------------------------------------


def test_control_by_id_posts_action_endpoint(server, services):
    server.reply({"ids": ["a", "b"]})

    resp = services.control_by_id(["a", "b"], "restart")

    assert server.last.url.path == "/api/v1/service/restart/ids"
    assert server.last_json() == {"ids": ["a", "b"]}
    assert resp.ids == ["a", "b"]


def test_control_by_id_unknown_action_fails_locally(server, services):
    with pytest.raises(errors.ValidationError) as exc_info:
        services.control_by_id(["a"], "explode")

    message = str(exc_info.value)
    for action in ("start", "stop", "restart", "pause", "unpause", "destroy"):
        assert action in message
    assert server.requests == []


def test_control_by_label(server, services):
    server.reply({"ids": ["a"]})

    services.control_by_label("/edge/", "stop")

    assert server.last.url.path == "/api/v1/service/stop/path-label"
    assert server.last_json() == {"path": "/edge/"}


def test_control_by_label_unknown_action_fails_locally(server, services):
    with pytest.raises(errors.ValidationError):
        services.control_by_label("/edge/", "reboot")
    assert server.requests == []


def test_create_by_path(server, services):
    server.reply([{"id": "s1"}, {"id": "s2"}])

    resp = services.create_by_path(service_types.CreateByPathOptions(paths=["/edge/"], force=True, action="load"))

    assert server.last.url.path == "/api/v1/service/load/templates-path-label"
    assert server.last_json() == {"paths": ["/edge/"], "force": True, "action": "load"}
    assert [r.id for r in resp] == ["s1", "s2"]


def test_create_by_path_rejects_unknown_action(server, services):
    with pytest.raises(errors.ValidationError, match="run, load"):
        services.create_by_path(service_types.CreateByPathOptions(paths=["/a/"], action="start"))
    assert server.requests == []


def test_delete_by_path_sends_path_in_body(server, services):
    server.reply([{"id": "s1", "result": "ok", "transactionId": "tx"}])

    results = services.delete_by_path("/edge/")

    assert server.last.method == "DELETE"
    assert server.last.url.path == "/api/v1/service/path"
    assert server.last_json() == {"path": "/edge/"}
    assert results[0].result == "ok"
    assert results[0].transaction_id == "tx"


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


def test_redeploy(server, services):
    server.reply_raw(json={"status": 200, "message": "success", "data": "success"})

    assert services.redeploy("svc-1") is None
    assert server.last.method == "PUT"
    assert server.last.url.path == "/api/v1/service/deployment/restart"
    assert server.last_json() == {"id": "svc-1"}


def test_validate_name_existing_is_invalid(server, services):
    server.reply(True)

    result = services.validate_name(service_types.ValidateNameOptions(name="web"))

    assert not result.is_valid
    assert "web" in result.message
    assert server.last.url.path == "/api/v1/service/name/check"
    assert dict(server.last.url.params) == {"name": "web"}


def test_validate_name_absent_is_valid(server, services):
    server.reply(False)

    result = services.validate_name(service_types.ValidateNameOptions(name="fresh", id="svc-1"))

    assert result.is_valid
    assert result.message == ""
    assert server.last.url.params["id"] == "svc-1"


def test_rollback(server, services):
    server.reply({"id": "tx-1", "status": "pending"})

    tx = services.rollback(service_types.RollBackRequest(id="svc-1", record_id="rec-1"))

    assert server.last.url.path == "/api/v1/service/rollback"
    assert server.last_json() == {"id": "svc-1", "recordId": "rec-1"}
    assert tx.id == "tx-1"


def test_rollback_unknown_record_is_remote_error(server, services):
    server.reply(None, status=404, message="record not found")

    with pytest.raises(errors.RemoteError) as exc_info:
        services.rollback(service_types.RollBackRequest(id="svc-1", record_id="missing"))
    assert exc_info.value.is_not_found


def test_get_statistics(server, services):
    server.reply({"total": 3, "health": 2})

    stats = services.get_statistics()

    assert server.last.url.path == "/api/v1/service/summary"
    assert (stats.total, stats.health) == (3, 2)
