import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.middleware.rbac import (
    get_current_host,
    get_current_host_or_admin,
    get_current_identity,
)
from app.models import room as room_model
from app.schemas.room import RoomCreate, RoomOut, RoomStatusUpdate, RoomUpdate
from stayvista.core.error_messages import ErrorMessages
from stayvista.core.exceptions import ValidationError
from stayvista.core.policy import ensure_room_owner, ensure_same_email

logger = logging.getLogger(__name__)

room_router = APIRouter(tags=["Rooms"])


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


@room_router.get("/rooms", response_model=List[RoomOut])
async def get_rooms(category: Optional[str] = Query(None)):
    return await room_model.list_rooms(category)


@room_router.post("/room", response_model=RoomOut)
async def add_room(data: RoomCreate, host: dict = Depends(get_current_host)):
    room = data.model_dump(by_alias=True)
    room["host"] = {
        "email": host["email"],
        "name": host.get("name"),
        "image": host.get("photo"),
    }
    created = await room_model.create_room(room)
    logger.info("Room %s created by %s", created["_id"], host["email"])
    return created


@room_router.delete("/roommm/{room_id}")
async def delete_room(room_id: str, host: dict = Depends(get_current_host)):
    room = await room_model.get_room(room_id)
    ensure_room_owner(room, host)
    await room_model.delete_room(room_id)
    return {"msg": "Room deleted", "deletedCount": 1}


@room_router.get("/my-listings/{email}", response_model=List[RoomOut])
async def get_my_listings(email: str, host: dict = Depends(get_current_host)):
    ensure_same_email(host, email)
    return await room_model.list_by_host(email)


@room_router.get("/room/{room_id}", response_model=RoomOut)
async def get_room(room_id: str):
    return await room_model.get_room(room_id)


@room_router.put("/room/update/{room_id}", response_model=RoomOut)
async def update_room(room_id: str, data: RoomUpdate, user: dict = Depends(get_current_host_or_admin)):
    room = await room_model.get_room(room_id)
    ensure_room_owner(room, user)
    patch = data.model_dump(by_alias=True, exclude_none=True)
    if not patch:
        return room
    if "from" in patch or "to" in patch:
        window_from = _naive_utc(patch.get("from", room["from"]))
        window_to = _naive_utc(patch.get("to", room["to"]))
        if window_to < window_from:
            raise ValidationError(ErrorMessages.INVALID_WINDOW)
    return await room_model.update_room(room_id, patch)


@room_router.patch("/room/status/{room_id}")
async def update_room_status(
    room_id: str, data: RoomStatusUpdate, identity: dict = Depends(get_current_identity)
):
    modified = await room_model.set_booked(room_id, data.status)
    return {"msg": "Room status updated", "booked": data.status, "modifiedCount": modified}
