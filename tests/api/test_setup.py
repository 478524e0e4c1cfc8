"""HTTP tests for the setup (onboarding) endpoints."""

from httpx import AsyncClient

_BODY = {
    "username": "admin",
    "password": "pw123",
    "org": "acme",
    "bucket": "default",
    "retentionPeriodHrs": 0,
}


async def test_setup_allowed_on_fresh_instance(client: AsyncClient) -> None:
    response = await client.get("/api/v1/setup")
    assert response.status_code == 200
    assert response.json() == {"allowed": True}


async def test_post_setup_creates_everything(client: AsyncClient) -> None:
    response = await client.post("/api/v1/setup", json=_BODY)

    assert response.status_code == 201
    data = response.json()
    assert data["user"]["name"] == "admin"
    assert data["user"]["status"] == "active"
    assert data["org"]["name"] == "acme"
    assert data["bucket"]["name"] == "default"
    assert data["bucket"]["orgID"] == data["org"]["id"]
    assert data["bucket"]["retentionPeriodHrs"] == 0
    auth = data["auth"]
    assert auth["token"]
    assert auth["userID"] == data["user"]["id"]
    assert auth["orgID"] == data["org"]["id"]
    assert auth["description"] == "admin's Token"
    assert len(auth["permissions"]) == 70
    assert auth["permissions"][-2] == {
        "action": "write",
        "resource": {"type": "buckets", "id": data["bucket"]["id"]},
    }
    assert auth["permissions"][-1]["action"] == "read"
    assert "pw123" not in response.text

    allowed = await client.get("/api/v1/setup")
    assert allowed.json() == {"allowed": False}


async def test_second_setup_conflicts(client: AsyncClient) -> None:
    assert (await client.post("/api/v1/setup", json=_BODY)).status_code == 201

    response = await client.post("/api/v1/setup", json={**_BODY, "username": "other"})

    assert response.status_code == 409
    body = response.json()
    assert body["error"] == "CONFLICT"
    assert body["message"] == "onboarding has already been completed"


async def test_empty_password_rejected(client: AsyncClient) -> None:
    response = await client.post("/api/v1/setup", json={**_BODY, "password": ""})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "EMPTY_VALUE"
    assert body["details"] == {"field": "password"}
    assert (await client.get("/api/v1/setup")).json() == {"allowed": True}


async def test_missing_fields_reported_as_empty(client: AsyncClient) -> None:
    response = await client.post("/api/v1/setup", json={"password": "pw123"})
    assert response.status_code == 400
    assert response.json()["message"] == "username is empty"


async def test_negative_retention_rejected(client: AsyncClient) -> None:
    response = await client.post("/api/v1/setup", json={**_BODY, "retentionPeriodHrs": -1})
    assert response.status_code == 422
    assert response.json()["error"] == "INVALID"


async def test_retention_hours_echoed(client: AsyncClient) -> None:
    response = await client.post("/api/v1/setup", json={**_BODY, "retentionPeriodHrs": 168})
    assert response.json()["bucket"]["retentionPeriodHrs"] == 168


async def test_malformed_body_is_validation_error(client: AsyncClient) -> None:
    response = await client.post("/api/v1/setup", json={**_BODY, "retentionPeriodHrs": "soon"})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"
