"""Router factory shared by the role, role option and user services.

build_entity_router() returns the five CRUD routes for one entity family.
Every route wraps its work in the entry/exit operation log and turns every
outcome into an ApiResponse envelope; failures go through classify_failure().

Annotations in this module must stay evaluated at definition time (no
postponed annotations): FastAPI reads the per-family schema classes from them.
"""

from collections.abc import Callable
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from maintainer.application.filters import IdEquals
from maintainer.application.services.base import EntityService
from maintainer.core.config import get_settings
from maintainer.core.exception_handlers import (
    DATA_NOT_FOUND,
    UniqueKeyMap,
    classify_failure,
    envelope_response,
)
from maintainer.schemas.envelope import ApiResponse
from maintainer.schemas.pagination import PaginationParams
from maintainer.shared.logging import get_logger, log_operation

logger = get_logger(__name__)


def _data_not_received(log_info: str) -> JSONResponse:
    logger.error("%s - No data received, data is null.", log_info)
    return envelope_response(
        ApiResponse.failure(400, "Data not received.", "Object received as null.")
    )


def _id_not_valid(log_info: str) -> JSONResponse:
    logger.error(
        "%s - Id not valid, Id can not be less than or equal to 0 or null.", log_info
    )
    return envelope_response(
        ApiResponse.failure(
            400, "Id not valid.", "Id can not be less than or equal to 0 or null."
        )
    )


def _dump(dto: BaseModel) -> dict[str, Any]:
    return dto.model_dump(mode="json")


def build_entity_router(
    *,
    name: str,
    component: str,
    get_service: Callable[..., EntityService[Any, Any]],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    unique_keys: UniqueKeyMap,
) -> APIRouter:
    """Build POST "", GET "", GET /{id}, PUT "" and DELETE /{id} for one entity family.

    Args:
        name: Route name prefix (e.g. "role"); GET /{id} is named "<name>_get_by_id".
        component: Label used in the operation log (e.g. "Role controller").
        get_service: Dependency returning the family's EntityService.
        create_schema: Pydantic model for the POST body.
        update_schema: Pydantic model for the PUT body (id and row_version included).
        unique_keys: Unique index name -> (field, message) for duplicate errors.

    Returns:
        Router to include under the family's prefix.
    """
    router = APIRouter()
    get_by_id_route = f"{name}_get_by_id"
    Service = Annotated[EntityService[Any, Any], Depends(get_service)]

    @router.post("", status_code=201, name=f"{name}_create")
    async def create(
        request: Request,
        service: Service,
        payload: Annotated[create_schema | None, Body()] = None,
    ) -> JSONResponse:
        with log_operation(logger, component, "Create") as log_info:
            if payload is None:
                return _data_not_received(log_info)
            try:
                created = await service.create(payload)
            except Exception as exc:
                return envelope_response(classify_failure(exc, unique_keys, log_info))
            logger.info("%s - Data created successfully.", log_info)
            location = request.url_for(get_by_id_route, id=created.id)
            return envelope_response(
                ApiResponse.ok(201, _dump(created)),
                headers={"Location": str(location)},
            )

    @router.get("", name=f"{name}_get_all")
    async def get_all(
        service: Service,
        status: Annotated[bool | None, Query()] = None,
        limit: Annotated[int | None, Query()] = None,
        offset: Annotated[int, Query()] = 0,
    ) -> JSONResponse:
        with log_operation(logger, component, "GetAll") as log_info:
            params = PaginationParams(
                status=status,
                limit=limit if limit is not None else get_settings().default_page_limit,
                offset=offset,
            )
            if not params.is_valid():
                logger.error("%s - Query params are not valid.", log_info)
                return envelope_response(
                    ApiResponse.failure(
                        400,
                        "Query params invalid.",
                        "The query params does not have the correct format.",
                        errors=params.errors(),
                    )
                )
            try:
                records = await service.get_all(
                    params.limit, params.offset, params.status_filter()
                )
            except Exception as exc:
                return envelope_response(classify_failure(exc, unique_keys, log_info))
            logger.info("%s - Data obtained.", log_info)
            return envelope_response(ApiResponse.ok(200, [_dump(r) for r in records]))

    @router.get("/{id}", name=get_by_id_route)
    async def get_by_id(id: int, service: Service) -> JSONResponse:
        with log_operation(logger, component, "GetById") as log_info:
            if id <= 0:
                return _id_not_valid(log_info)
            try:
                record = await service.get_one(IdEquals(id))
            except Exception as exc:
                return envelope_response(classify_failure(exc, unique_keys, log_info))
            if record is None:
                logger.error("%s - %s", log_info, DATA_NOT_FOUND)
                return envelope_response(ApiResponse.failure(404, DATA_NOT_FOUND))
            logger.info("%s - Data obtained.", log_info)
            return envelope_response(ApiResponse.ok(200, _dump(record)))

    @router.put("", name=f"{name}_update")
    async def update(
        service: Service,
        payload: Annotated[update_schema | None, Body()] = None,
    ) -> JSONResponse:
        with log_operation(logger, component, "Update") as log_info:
            if payload is None:
                return _data_not_received(log_info)
            try:
                updated = await service.update(payload)
            except Exception as exc:
                return envelope_response(classify_failure(exc, unique_keys, log_info))
            if updated is None:
                logger.error("%s - %s", log_info, DATA_NOT_FOUND)
                return envelope_response(ApiResponse.failure(404, DATA_NOT_FOUND))
            logger.info("%s - Data updated successfully.", log_info)
            return envelope_response(ApiResponse.ok(200, _dump(updated)))

    @router.delete("/{id}", name=f"{name}_delete")
    async def delete(id: int, service: Service) -> JSONResponse:
        with log_operation(logger, component, "Delete") as log_info:
            if id <= 0:
                return _id_not_valid(log_info)
            try:
                await service.delete(id)
            except Exception as exc:
                return envelope_response(classify_failure(exc, unique_keys, log_info))
            logger.info("%s - Successful elimination.", log_info)
            return envelope_response(ApiResponse.ok(200))

    return router
