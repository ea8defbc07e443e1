# app/models/room.py
from typing import Optional

from stayvista.core.error_messages import ErrorMessages
from stayvista.core.exceptions import NotFound
from stayvista.db import database
from stayvista.serialize import parse_object_id, serialize_doc, serialize_list

NO_CATEGORY = ("", "null", "none")


async def create_room(data: dict):
    room = {**data, "booked": False}
    result = await database.rooms().insert_one(room)
    room["_id"] = result.inserted_id
    return serialize_doc(room)


async def list_rooms(category: Optional[str] = None):
    query = {}
    if category and category.lower() not in NO_CATEGORY:
        query["category"] = category
    rooms = await database.rooms().find(query).to_list(None)
    return serialize_list(rooms)


async def get_room(room_id: str):
    room = await database.rooms().find_one({"_id": parse_object_id(room_id)})
    if not room:
        raise NotFound(ErrorMessages.ROOM_NOT_FOUND)
    return serialize_doc(room)


async def update_room(room_id: str, patch: dict):
    result = await database.rooms().update_one(
        {"_id": parse_object_id(room_id)}, {"$set": patch}
    )
    if result.matched_count == 0:
        raise NotFound(ErrorMessages.ROOM_NOT_FOUND)
    return await get_room(room_id)


async def set_booked(room_id: str, value: bool):
    result = await database.rooms().update_one(
        {"_id": parse_object_id(room_id)}, {"$set": {"booked": value}}
    )
    if result.matched_count == 0:
        raise NotFound(ErrorMessages.ROOM_NOT_FOUND)
    return result.modified_count


async def delete_room(room_id: str):
    result = await database.rooms().delete_one({"_id": parse_object_id(room_id)})
    if result.deleted_count == 0:
        raise NotFound(ErrorMessages.ROOM_NOT_FOUND)
    return result.deleted_count


async def list_by_host(email: str):
    rooms = await database.rooms().find({"host.email": email}).to_list(None)
    return serialize_list(rooms)


async def count_rooms(host_email: Optional[str] = None) -> int:
    query = {"host.email": host_email} if host_email else {}
    return await database.rooms().count_documents(query)
