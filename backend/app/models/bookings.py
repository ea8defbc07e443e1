# app/models/bookings.py
from stayvista.core.error_messages import ErrorMessages
from stayvista.core.exceptions import NotFound
from stayvista.db import database
from stayvista.serialize import parse_object_id, serialize_doc, serialize_list


async def create_booking(data: dict):
    booking = dict(data)
    result = await database.bookings().insert_one(booking)
    booking["_id"] = result.inserted_id
    return serialize_doc(booking)


async def get_booking(booking_id: str):
    booking = await database.bookings().find_one({"_id": parse_object_id(booking_id)})
    if not booking:
        raise NotFound(ErrorMessages.BOOKING_NOT_FOUND)
    return serialize_doc(booking)


async def list_by_guest(email: str):
    bookings = await database.bookings().find({"guest.email": email}).to_list(None)
    return serialize_list(bookings)


async def list_by_host(email: str):
    bookings = await database.bookings().find({"host.email": email}).to_list(None)
    return serialize_list(bookings)


async def delete_booking(booking_id: str):
    result = await database.bookings().delete_one({"_id": parse_object_id(booking_id)})
    if result.deleted_count == 0:
        raise NotFound(ErrorMessages.BOOKING_NOT_FOUND)
    return result.deleted_count

