import logging
from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends

from app.middleware.rbac import get_current_host, get_current_user
from app.models import bookings as booking_model
from app.models import room as room_model
from app.schemas.bookings import BookingCreate, BookingOut
from stayvista.core.error_messages import ErrorMessages
from stayvista.core.exceptions import Conflict, Forbidden
from stayvista.core.policy import ensure_booking_party, ensure_same_email, is_admin
from stayvista.service import notification_service

logger = logging.getLogger(__name__)

booking_router = APIRouter(tags=["Bookings"])


@booking_router.post("/booking", response_model=BookingOut)
async def create_booking(
    data: BookingCreate,
    background_tasks: BackgroundTasks,
    user: dict = Depends(get_current_user),
):
    if data.guest.email != user["email"] and not is_admin(user):
        raise Forbidden(ErrorMessages.BOOKING_FOR_OTHER)

    room = await room_model.get_room(data.roomId)
    if room.get("booked"):
        raise Conflict(ErrorMessages.ROOM_ALREADY_BOOKED)

    booking = data.model_dump(by_alias=True, exclude_none=True)
    booking["host"] = room["host"]
    # the room's booked flag is flipped separately through PATCH /room/status
    saved = await booking_model.create_booking(booking)
    logger.info("Booking %s saved for room %s (tx %s)", saved["_id"], data.roomId, data.transactionId)

    ids = await notification_service.enqueue_booking_notifications(saved)
    if ids:
        background_tasks.add_task(notification_service.deliver_many, ids)

    return saved


@booking_router.get("/my-bookings/{email}", response_model=List[BookingOut])
async def get_my_bookings(email: str, user: dict = Depends(get_current_user)):
    ensure_same_email(user, email)
    return await booking_model.list_by_guest(email)


@booking_router.get("/manage-bookings/{email}", response_model=List[BookingOut])
async def get_host_bookings(email: str, host: dict = Depends(get_current_host)):
    ensure_same_email(host, email)
    return await booking_model.list_by_host(email)


@booking_router.delete("/booking/{booking_id}")
async def delete_booking(booking_id: str, user: dict = Depends(get_current_user)):
    booking = await booking_model.get_booking(booking_id)
    ensure_booking_party(booking, user)
    await booking_model.delete_booking(booking_id)
    logger.info("Booking %s deleted by %s", booking_id, user["email"])
    return {"msg": "Booking deleted", "deletedCount": 1}
