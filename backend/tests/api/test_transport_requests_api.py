"""Transport request endpoints: status codes and envelopes for the full CRUD cycle.

Invariants:
    - POST → 201 {success, id}, status always "Pending"
    - Missing any required field → 400, nothing stored
    - PUT malformed id → 400; unknown id → 404; partial body touches only supplied fields
    - DELETE twice → 200 then 404
"""

import pytest

from smart_transport.core.domain_types import Collection, TRANSPORT_REQUEST_REQUIRED

UNKNOWN_ID = "65a1f0c2e4b0a1b2c3d4e5f6"


async def test_create_returns_201_with_id(client, trip_request):
    res = await client.post("/transport_requests", json=trip_request)
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert len(body["id"]) == 24


async def test_created_request_listed_as_pending(client, trip_request):
    res = await client.post(
        "/transport_requests", json={**trip_request, "status": "Approved"},
    )
    request_id = res.json()["id"]

    listing = await client.get("/transport_requests")
    assert listing.status_code == 200
    (entry,) = [r for r in listing.json() if r["_id"] == request_id]
    assert entry["status"] == "Pending"
    for field, value in trip_request.items():
        assert entry[field] == value


@pytest.mark.parametrize("dropped", TRANSPORT_REQUEST_REQUIRED)
async def test_missing_field_returns_400(client, store, trip_request, dropped):
    payload = {k: v for k, v in trip_request.items() if k != dropped}
    res = await client.post("/transport_requests", json=payload)
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert dropped in body["message"]
    assert await store.find_many(Collection.TRANSPORT_REQUESTS) == []


async def test_empty_string_field_returns_400(client, trip_request):
    res = await client.post("/transport_requests", json={**trip_request, "name": ""})
    assert res.status_code == 400


async def test_unknown_fields_are_not_stored(client, store, trip_request):
    await client.post(
        "/transport_requests", json={**trip_request, "userEmail": "x@diu.edu"},
    )
    (stored,) = await store.find_many(Collection.TRANSPORT_REQUESTS)
    assert "userEmail" not in stored


async def test_numeric_student_id_is_coerced(client, store, trip_request):
    res = await client.post("/transport_requests", json={**trip_request, "studentId": 221})
    assert res.status_code == 201
    (stored,) = await store.find_many(Collection.TRANSPORT_REQUESTS)
    assert stored["studentId"] == "221"


async def test_object_for_string_field_returns_400(client, trip_request):
    res = await client.post(
        "/transport_requests", json={**trip_request, "reason": {"nested": True}},
    )
    assert res.status_code == 400
    assert res.json() == {"success": False, "message": "Invalid request fields: reason"}


async def test_list_returns_all_created(client, trip_request):
    for i in range(3):
        await client.post("/transport_requests", json={**trip_request, "studentId": f"S{i}"})
    res = await client.get("/transport_requests")
    assert res.status_code == 200
    assert {r["studentId"] for r in res.json()} == {"S0", "S1", "S2"}


async def test_update_malformed_id_returns_400(client):
    res = await client.put("/transport_requests/not-an-id", json={"status": "Approved"})
    assert res.status_code == 400
    assert res.json()["success"] is False


async def test_update_unknown_id_returns_404(client):
    res = await client.put(f"/transport_requests/{UNKNOWN_ID}", json={"status": "Approved"})
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Transport request not found"}


async def test_partial_update_touches_only_supplied_fields(client, trip_request):
    request_id = (await client.post("/transport_requests", json=trip_request)).json()["id"]

    res = await client.put(
        f"/transport_requests/{request_id}",
        json={"status": "Approved", "destination": "Campus3"},
    )
    assert res.status_code == 200
    assert res.json()["success"] is True

    (entry,) = (await client.get("/transport_requests")).json()
    assert entry["status"] == "Approved"
    assert entry["destination"] == "Campus3"
    assert entry["reason"] == trip_request["reason"]
    assert entry["studentId"] == trip_request["studentId"]


async def test_update_with_no_known_fields_returns_400(client, trip_request):
    request_id = (await client.post("/transport_requests", json=trip_request)).json()["id"]
    res = await client.put(f"/transport_requests/{request_id}", json={"foo": "bar"})
    assert res.status_code == 400


async def test_update_blanking_required_fields_returns_400(client, trip_request):
    request_id = (await client.post("/transport_requests", json=trip_request)).json()["id"]

    res = await client.put(
        f"/transport_requests/{request_id}", json={"name": "  ", "studentId": ""},
    )
    assert res.status_code == 400
    assert res.json() == {
        "success": False, "message": "Missing required fields: studentId, name",
    }

    (entry,) = (await client.get("/transport_requests")).json()
    assert entry["name"] == trip_request["name"]
    assert entry["studentId"] == trip_request["studentId"]


async def test_delete_twice_returns_200_then_404(client, trip_request):
    request_id = (await client.post("/transport_requests", json=trip_request)).json()["id"]

    first = await client.delete(f"/transport_requests/{request_id}")
    assert first.status_code == 200
    assert first.json()["success"] is True

    second = await client.delete(f"/transport_requests/{request_id}")
    assert second.status_code == 404
    assert second.json()["success"] is False


async def test_delete_malformed_id_returns_400(client):
    res = await client.delete("/transport_requests/123")
    assert res.status_code == 400
