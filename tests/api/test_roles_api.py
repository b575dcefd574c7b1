"""Roles API boundary: envelope, statuses and input checks (service mocked)."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from httpx import AsyncClient
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from maintainer.api.v1.dependencies import get_role_service
from maintainer.application.filters import IdEquals, StatusEquals
from maintainer.domain.exceptions import (
    RecordAlreadyDeletedException,
    RecordNotFoundException,
    StoreTimeoutException,
)
from maintainer.schemas.role import RoleDto

NOW = datetime(2025, 3, 1, 12, 0, 0, tzinfo=UTC)


def _role_dto(role_id: int = 5, name: str = "Admin") -> RoleDto:
    return RoleDto(
        id=role_id,
        name=name,
        status=True,
        row_version="3f2a" * 8,
        created_at=NOW,
        updated_at=NOW,
        role_options=[],
    )


def _update_body(**overrides) -> dict:
    body = {
        "id": 5,
        "name": "Admin",
        "status": True,
        "row_version": "3f2a" * 8,
        "created_at": NOW.isoformat(),
        "updated_at": NOW.isoformat(),
        "role_options": [],
    }
    body.update(overrides)
    return body


@pytest.fixture
def role_service(app: FastAPI) -> AsyncMock:
    service = AsyncMock()
    app.dependency_overrides[get_role_service] = lambda: service
    return service


async def test_create_returns_201_with_location(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    role_service.create.return_value = _role_dto()

    response = await client.post("/api/v1/roles", json={"name": "Admin"})

    assert response.status_code == 201
    assert response.headers["location"] == "http://test/api/v1/roles/5"
    body = response.json()
    assert body["success"] is True
    assert body["status"] == 201
    assert body["data"]["id"] == 5
    assert body["data"]["status"] is True
    assert body["data"]["row_version"]
    assert body["errors"] == {}


async def test_create_without_body_is_data_not_received(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    response = await client.post("/api/v1/roles")

    assert response.status_code == 400
    body = response.json()
    assert body["title"] == "Data not received."
    assert body["detail"] == "Object received as null."
    role_service.create.assert_not_awaited()


async def test_create_invalid_body_lists_field_errors(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    response = await client.post("/api/v1/roles", json={"name": "x" * 31})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["title"] == "Data not valid."
    assert body["detail"] == "The data has an invalid format."
    assert "name" in body["errors"]
    role_service.create.assert_not_awaited()


async def test_create_duplicate_name(client: AsyncClient, role_service: AsyncMock) -> None:
    role_service.create.side_effect = IntegrityError(
        "INSERT INTO roles",
        {},
        Exception('duplicate key value violates unique constraint "ix_uq_roles_name"'),
    )

    response = await client.post("/api/v1/roles", json={"name": "Admin"})

    assert response.status_code == 400
    body = response.json()
    assert body["title"] == "Duplicity of indexes."
    assert body["errors"] == {"name": ["The name of the role already exists."]}


async def test_create_with_duplicate_nested_option_is_400(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    role_service.create.side_effect = IntegrityError(
        "INSERT INTO role_options",
        {},
        Exception(
            'duplicate key value violates unique constraint "ix_uq_role_options_name"'
        ),
    )

    response = await client.post(
        "/api/v1/roles",
        json={
            "name": "Auditor",
            "role_options": [{"id": 404, "name": "Users", "link": "/users-copy"}],
        },
    )

    assert response.status_code == 400
    body = response.json()
    assert body["title"] == "Duplicity of indexes."
    assert body["errors"] == {
        "role_options": ["The name of a role option already exists."]
    }


async def test_create_store_timeout_is_408(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    role_service.create.side_effect = StoreTimeoutException("commit", 1)

    response = await client.post("/api/v1/roles", json={"name": "Admin"})

    assert response.status_code == 408
    assert response.json()["title"] == "Timeout."


async def test_unexpected_failure_is_generic_500(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    role_service.create.side_effect = RuntimeError("connection string with secrets")

    response = await client.post("/api/v1/roles", json={"name": "Admin"})

    assert response.status_code == 500
    body = response.json()
    assert body["title"] == "Internal Server Error."
    assert "secrets" not in response.text


async def test_get_all_passes_pagination_and_status(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    role_service.get_all.return_value = [_role_dto(1), _role_dto(2, "Guest")]

    response = await client.get("/api/v1/roles?status=true&limit=2&offset=4")

    assert response.status_code == 200
    assert [r["id"] for r in response.json()["data"]] == [1, 2]
    role_service.get_all.assert_awaited_once_with(2, 4, StatusEquals(True))


async def test_get_all_defaults(client: AsyncClient, role_service: AsyncMock) -> None:
    role_service.get_all.return_value = []

    response = await client.get("/api/v1/roles")

    assert response.status_code == 200
    assert response.json()["data"] == []
    role_service.get_all.assert_awaited_once_with(10, 0, None)


async def test_get_all_reports_both_pagination_errors(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    response = await client.get("/api/v1/roles?limit=0&offset=-1")

    assert response.status_code == 400
    body = response.json()
    assert body["title"] == "Query params invalid."
    assert body["detail"] == "The query params does not have the correct format."
    assert body["errors"] == {
        "limit": ["Limit param must be a positive number."],
        "offset": ["Offset param must be zero or a positive number."],
    }
    role_service.get_all.assert_not_awaited()


@pytest.mark.parametrize("record_id", [0, -3])
async def test_get_by_id_rejects_non_positive_id(
    client: AsyncClient, role_service: AsyncMock, record_id: int
) -> None:
    response = await client.get(f"/api/v1/roles/{record_id}")

    assert response.status_code == 400
    assert response.json()["title"] == "Id not valid."
    role_service.get_one.assert_not_awaited()


async def test_get_by_id_not_found(client: AsyncClient, role_service: AsyncMock) -> None:
    role_service.get_one.return_value = None

    response = await client.get("/api/v1/roles/77")

    assert response.status_code == 404
    assert response.json()["title"] == "Data not found."
    role_service.get_one.assert_awaited_once_with(IdEquals(77))


async def test_get_by_id_found(client: AsyncClient, role_service: AsyncMock) -> None:
    role_service.get_one.return_value = _role_dto()

    response = await client.get("/api/v1/roles/5")

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Admin"


async def test_update_success(client: AsyncClient, role_service: AsyncMock) -> None:
    role_service.update.return_value = _role_dto(name="Root")

    response = await client.put("/api/v1/roles", json=_update_body(name="Root"))

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Root"
    payload = role_service.update.await_args.args[0]
    assert payload.id == 5


async def test_update_absent_record_is_404(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    role_service.update.return_value = None

    response = await client.put("/api/v1/roles", json=_update_body())

    assert response.status_code == 404


async def test_update_stale_token_is_409(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    role_service.update.side_effect = StaleDataError("0 rows matched")

    response = await client.put("/api/v1/roles", json=_update_body())

    assert response.status_code == 409
    body = response.json()
    assert body["title"] == "Inconsistent data."
    assert body["detail"] == "The record has been modified by another user."


async def test_update_missing_row_version_is_invalid(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    body = _update_body()
    del body["row_version"]

    response = await client.put("/api/v1/roles", json=body)

    assert response.status_code == 400
    assert "row_version" in response.json()["errors"]


async def test_delete_success(client: AsyncClient, role_service: AsyncMock) -> None:
    response = await client.delete("/api/v1/roles/5")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"] is None
    role_service.delete.assert_awaited_once_with(5)


async def test_delete_already_deleted_is_409(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    role_service.delete.side_effect = RecordAlreadyDeletedException("Role", 5)

    response = await client.delete("/api/v1/roles/5")

    assert response.status_code == 409
    assert response.json()["detail"] == "The record is already deleted."


async def test_delete_missing_is_404(client: AsyncClient, role_service: AsyncMock) -> None:
    role_service.delete.side_effect = RecordNotFoundException("Role", 5)

    response = await client.delete("/api/v1/roles/5")

    assert response.status_code == 404
    assert response.json()["title"] == "Data not found."


async def test_delete_non_numeric_id_is_invalid(
    client: AsyncClient, role_service: AsyncMock
) -> None:
    response = await client.delete("/api/v1/roles/abc")

    assert response.status_code == 400
    assert response.json()["title"] == "Data not valid."
