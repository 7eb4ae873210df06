"""Room Resource: REST endpoints for creating, listing, reading, updating and deleting rooms.

Invariants:
    - roomName is checked by check_room_fields before any repository call
    - POST rejects a body carrying id (400 ID_EXISTS); PUT without id falls back to POST
    - GET by unknown id is 404; DELETE of an unknown id still answers 200
    - Every successful mutation carries the alert headers; list carries X-Total-Count
    - Out-of-range integers (ids beyond BIGINT, huge pages) are rejected with 400 before any query
"""

import logging

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status

from roomfinder.api.dependencies import get_room_service
from roomfinder.config import Settings, get_settings
from roomfinder.core.alert_headers import entity_alert, failure_alert
from roomfinder.core.domain_types import (
    BIGINT_MAX, BIGINT_MIN, MAX_PAGE, AlertAction, RoomPk,
)
from roomfinder.core.errors import (
    IdConflictError, ResourceNotFoundError, RoomValidationError,
)
from roomfinder.core.pagination import build_link_header, resolve_page_request
from roomfinder.core.sort_directive import parse_sort
from roomfinder.core.validate_room import check_room_fields
from roomfinder.schemas.room import RoomPayload, RoomResponse
from roomfinder.services.room_service import RoomService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/rooms", tags=["rooms"])

ENTITY_NAME = "room"


def _require_fields(body: RoomPayload) -> None:
    violation = check_room_fields(body)
    if violation:
        raise RoomValidationError(violation.message, violation.field)


async def _create(
    body: RoomPayload,
    response: Response,
    service: RoomService,
    settings: Settings,
) -> RoomResponse:
    _require_fields(body)
    if body.id is not None:
        raise IdConflictError(
            ENTITY_NAME,
            headers=failure_alert(settings.app_name, ENTITY_NAME, "idexists"),
        )
    room = await service.save(body)
    logger.info("Room created", extra={"room_pk": room.id})
    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = f"{router.prefix}/{room.id}"
    response.headers.update(
        entity_alert(settings.app_name, ENTITY_NAME, AlertAction.CREATED, str(room.id)),
    )
    return RoomResponse.model_validate(room)


@router.post(
    "", response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_room(
    body: RoomPayload,
    response: Response,
    service: RoomService = Depends(get_room_service),
    settings: Settings = Depends(get_settings),
):
    """Create a new room. The body must not carry an id."""
    return await _create(body, response, service, settings)


@router.put("", response_model=RoomResponse)
async def update_room(
    body: RoomPayload,
    response: Response,
    service: RoomService = Depends(get_room_service),
    settings: Settings = Depends(get_settings),
):
    """Replace an existing room. Without an id the room is created instead."""
    if body.id is None:
        return await _create(body, response, service, settings)
    _require_fields(body)
    room = await service.save(body)
    response.headers.update(
        entity_alert(settings.app_name, ENTITY_NAME, AlertAction.UPDATED, str(room.id)),
    )
    return RoomResponse.model_validate(room)


@router.get("", response_model=list[RoomResponse])
async def get_all_rooms(
    request: Request,
    response: Response,
    sort: list[str] | None = Query(None),
    page: int | None = Query(None, ge=0, le=MAX_PAGE),
    size: int | None = Query(None, ge=1),
    service: RoomService = Depends(get_room_service),
    settings: Settings = Depends(get_settings),
):
    """List rooms, optionally sorted (`sort=field,desc`) and paged (`page`, `size`)."""
    sort_keys = parse_sort(sort)
    window = resolve_page_request(
        page, size, settings.page_size_default, settings.page_size_max,
    )
    rooms, total = await service.find_all_with_count(sort=sort_keys, page=window)

    response.headers["X-Total-Count"] = str(total)
    if window is not None:
        response.headers["Link"] = build_link_header(
            request.url.path, window, total,
        )
    return [RoomResponse.model_validate(r) for r in rooms]


@router.get("/{room_pk}", response_model=RoomResponse)
async def get_room(
    room_pk: int = Path(ge=BIGINT_MIN, le=BIGINT_MAX),
    service: RoomService = Depends(get_room_service),
):
    """Get one room by its server id."""
    room = await service.find_one(RoomPk(room_pk))
    if room is None:
        raise ResourceNotFoundError("Room", str(room_pk))
    return RoomResponse.model_validate(room)


@router.delete("/{room_pk}", status_code=status.HTTP_200_OK)
async def delete_room(
    room_pk: int = Path(ge=BIGINT_MIN, le=BIGINT_MAX),
    service: RoomService = Depends(get_room_service),
    settings: Settings = Depends(get_settings),
):
    """Delete a room. Unknown ids are accepted."""
    await service.delete(RoomPk(room_pk))
    return Response(
        status_code=status.HTTP_200_OK,
        headers=entity_alert(
            settings.app_name, ENTITY_NAME, AlertAction.DELETED, str(room_pk),
        ),
    )
