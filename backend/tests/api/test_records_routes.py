"""Records & Health Routes — list, reload, delete and probes."""

from organization.core.errors import StoreUnavailableError


async def test_list_records_returns_cached_list(client, controller, store):
    store.seed("Ada", "Engineer", "50000.50")
    await controller.load()
    store.calls.clear()

    res = await client.get("/api/v1/records")

    assert res.status_code == 200
    assert res.json() == {
        "records": [
            {"id": 1, "name": "Ada", "position": "Engineer", "salary": "50000.50"},
        ],
    }
    assert store.calls == []


async def test_reload_reads_store(client, store):
    store.seed("Ada", "Engineer", 1)
    res = await client.post("/api/v1/records/reload")
    assert [r["name"] for r in res.json()["records"]] == ["Ada"]


async def test_reload_failure_is_503_and_records_kept(client, controller, store):
    store.seed("Ada", "Engineer", 1)
    await controller.load()
    store.fail_on["list_all"] = StoreUnavailableError("disk gone", "execute")

    res = await client.post("/api/v1/records/reload")

    assert res.status_code == 503
    assert len(controller.records.value) == 1


async def test_delete_removes_record(client, controller, store):
    store.seed("Ada", "Engineer", 1)
    await controller.load()
    res = await client.delete("/api/v1/records/1")
    assert res.status_code == 200
    assert res.json() == {"records": []}


async def test_delete_missing_record_is_ok(client):
    res = await client.delete("/api/v1/records/7")
    assert res.status_code == 200
    assert res.json() == {"records": []}


async def test_health_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_database_is_503(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
