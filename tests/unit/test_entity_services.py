"""EntityService business rules with mocked repositories."""

import asyncio
from datetime import UTC, date, datetime, timedelta
from unittest.mock import AsyncMock

import bcrypt
import pytest

from maintainer.application.filters import IdEquals, StatusEquals
from maintainer.application.services import RoleOptionService, RoleService, UserService
from maintainer.domain.exceptions import (
    RecordAlreadyDeletedException,
    RecordNotFoundException,
)
from maintainer.infrastructure.persistence.models import Role, RoleOption, User
from maintainer.infrastructure.security.password import _digest
from maintainer.schemas.role import RoleCreate, RoleUpdate
from maintainer.schemas.role_option import RoleOptionCreate, RoleOptionUpdate
from maintainer.schemas.user import UserCreate, UserUpdate

CREATED = datetime(2024, 1, 10, 8, 0, 0, tzinfo=UTC)
EARLIER = datetime(2024, 1, 12, 8, 0, 0, tzinfo=UTC)


def _stored_option(**overrides) -> RoleOption:
    values = dict(
        id=1,
        name="Users",
        link="/users",
        status=True,
        row_version="v1",
        created_at=CREATED,
        updated_at=CREATED,
    )
    values.update(overrides)
    return RoleOption(**values)


def _stored_role(**overrides) -> Role:
    values = dict(
        id=1,
        name="Admin",
        status=True,
        row_version="v1",
        created_at=CREATED,
        updated_at=CREATED,
        role_options=[_stored_option()],
    )
    values.update(overrides)
    return Role(**values)


def _stored_user(**overrides) -> User:
    values = dict(
        id=9,
        dni="0102030405",
        first_name="Ana",
        last_name="Torres",
        birth_date=date(1990, 5, 17),
        phone="0991234567",
        username="AnaTorres1",
        email="ana@example.com",
        password="$2b$12$storedhash",
        active_session=False,
        role_id=1,
        role=_stored_role(),
        status=True,
        row_version="v1",
        created_at=CREATED,
        updated_at=CREATED,
    )
    values.update(overrides)
    return User(**values)


def _user_fields() -> dict:
    return {
        "dni": "0102030405",
        "first_name": "Ana",
        "last_name": "Torres",
        "birth_date": "1990-05-17",
        "phone": "0991234567",
        "username": "AnaTorres1",
        "email": "ana@example.com",
        "role": {"id": 1, "name": "Admin"},
    }


@pytest.fixture
def repo() -> AsyncMock:
    return AsyncMock()


async def test_create_maps_payload_without_generated_fields(repo: AsyncMock) -> None:
    repo.create.return_value = _stored_option()
    service = RoleOptionService(repo)

    dto = await service.create(RoleOptionCreate(name="Users", link="/users"))

    entity = repo.create.await_args.args[0]
    assert isinstance(entity, RoleOption)
    assert (entity.id, entity.name, entity.link) == (None, "Users", "/users")
    assert entity.row_version is None
    assert dto.id == 1
    assert dto.status is True
    assert dto.row_version == "v1"


async def test_role_create_carries_option_references(repo: AsyncMock) -> None:
    repo.create.return_value = _stored_role()
    service = RoleService(repo)

    await service.create(
        RoleCreate.model_validate(
            {
                "name": "Admin",
                "role_options": [
                    {"id": 1, "name": "Users", "link": "/users"},
                    {"name": "Reports", "link": "/reports"},
                ],
            }
        )
    )

    entity = repo.create.await_args.args[0]
    assert [(o.id, o.name) for o in entity.role_options] == [
        (1, "Users"),
        (None, "Reports"),
    ]


async def test_get_all_forwards_pagination_and_filter(repo: AsyncMock) -> None:
    repo.get_all.return_value = [_stored_role(id=1), _stored_role(id=2, name="Guest")]
    service = RoleService(repo)

    dtos = await service.get_all(2, 4, StatusEquals(True))

    repo.get_all.assert_awaited_once_with(2, 4, StatusEquals(True))
    assert [d.id for d in dtos] == [1, 2]
    assert dtos[0].role_options[0].name == "Users"


async def test_get_one_returns_none_when_missing(repo: AsyncMock) -> None:
    repo.get_one.return_value = None
    assert await RoleService(repo).get_one(IdEquals(5)) is None
    repo.get_one.assert_awaited_once_with(IdEquals(5))


async def test_update_returns_none_when_record_absent(repo: AsyncMock) -> None:
    repo.get_one.return_value = None
    payload = RoleOptionUpdate(
        id=40,
        name="Users",
        link="/users",
        status=True,
        row_version="v1",
        created_at=CREATED,
        updated_at=CREATED,
    )

    assert await RoleOptionService(repo).update(payload) is None
    repo.update.assert_not_awaited()


async def test_update_keeps_created_at_and_status(repo: AsyncMock) -> None:
    repo.get_one.return_value = _stored_role()
    repo.update.return_value = _stored_role(name="Root", row_version="v2")
    payload = RoleUpdate(
        id=1,
        name="Root",
        status=False,
        row_version="v1",
        created_at=EARLIER,
        updated_at=EARLIER,
        role_options=[],
    )
    before = datetime.now(UTC)

    dto = await RoleService(repo).update(payload)

    entity = repo.update.await_args.args[0]
    assert entity.id == 1
    assert entity.name == "Root"
    assert entity.row_version == "v1"
    assert entity.created_at == CREATED
    assert entity.status is True
    assert entity.updated_at >= before
    assert dto.row_version == "v2"


async def test_user_update_ignores_payload_password(repo: AsyncMock) -> None:
    repo.get_one.return_value = _stored_user()
    repo.update.return_value = _stored_user(row_version="v2")
    payload = UserUpdate.model_validate(
        {
            **_user_fields(),
            "id": 9,
            "status": True,
            "row_version": "v1",
            "created_at": CREATED,
            "updated_at": CREATED,
            "password": "Changed1!",
        }
    )

    dto = await UserService(repo).update(payload)

    entity = repo.update.await_args.args[0]
    assert entity.password == "$2b$12$storedhash"
    assert entity.role.id == 1
    assert "password" not in dto.model_dump()


async def test_user_create_hashes_password_in_worker_thread(
    repo: AsyncMock, monkeypatch: pytest.MonkeyPatch
) -> None:
    offloaded = []
    to_thread = asyncio.to_thread

    async def recording_to_thread(func, *args, **kwargs):
        offloaded.append(func.__name__)
        return await to_thread(func, *args, **kwargs)

    monkeypatch.setattr(asyncio, "to_thread", recording_to_thread)
    repo.create.return_value = _stored_user()
    payload = UserCreate.model_validate({**_user_fields(), "password": "Secret1!"})

    await UserService(repo).create(payload)

    entity = repo.create.await_args.args[0]
    assert offloaded == ["get_password_hash"]
    assert entity.password != "Secret1!"
    assert bcrypt.checkpw(_digest("Secret1!"), entity.password.encode("utf-8"))
    assert entity.role.name == "Admin"


async def test_delete_missing_record_raises_not_found(repo: AsyncMock) -> None:
    repo.get_one.return_value = None
    with pytest.raises(RecordNotFoundException):
        await RoleService(repo).delete(8)
    repo.delete.assert_not_awaited()


async def test_delete_inactive_record_raises_already_deleted(repo: AsyncMock) -> None:
    repo.get_one.return_value = _stored_role(status=False)
    with pytest.raises(RecordAlreadyDeletedException):
        await RoleService(repo).delete(1)
    repo.delete.assert_not_awaited()


async def test_delete_flips_status_and_touches_updated_at(repo: AsyncMock) -> None:
    stored = _stored_role()
    repo.get_one.return_value = stored
    before = datetime.now(UTC) - timedelta(seconds=1)

    await RoleService(repo).delete(1)

    entity = repo.delete.await_args.args[0]
    assert entity.status is False
    assert entity.updated_at > before
    assert entity.created_at == CREATED
    assert entity.row_version == "v1"


async def test_store_errors_pass_through(repo: AsyncMock) -> None:
    repo.get_all.side_effect = RuntimeError("store down")
    with pytest.raises(RuntimeError):
        await RoleService(repo).get_all(10, 0)
