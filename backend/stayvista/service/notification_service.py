# stayvista/service/notification_service.py
"""Booking notifications through a Mongo outbox.

Messages are written to the ``notifications`` collection as ``pending`` and
delivered afterwards, either by a background task of the request that created
them or by the outbox worker. A delivery first claims the entry
(``pending`` -> ``sending``), so every message is attempted at most once.
Nothing in here raises into the booking flow.
"""
import logging
from datetime import datetime, timedelta
from typing import List

from starlette.concurrency import run_in_threadpool

from stayvista.db import database
from stayvista.service import email_service

logger = logging.getLogger(__name__)

PENDING = "pending"
SENDING = "sending"
SENT = "sent"
FAILED = "failed"


def booking_messages(booking: dict) -> List[dict]:
    guest = booking.get("guest") or {}
    host = booking.get("host") or {}
    messages = []
    if guest.get("email"):
        messages.append({
            "to": guest["email"],
            "subject": "Booking Successful!",
            "body": (
                "You've successfully booked a room through StayVista. "
                f"Transaction Id: {booking.get('transactionId')}"
            ),
        })
    if host.get("email"):
        messages.append({
            "to": host["email"],
            "subject": "Your room got booked!",
            "body": f"Get ready to welcome {guest.get('name') or guest.get('email')}.",
        })
    return messages


async def enqueue(messages: List[dict], booking_id=None) -> list:
    ids = []
    for message in messages:
        entry = {
            **message,
            "booking_id": booking_id,
            "status": PENDING,
            "attempts": 0,
            "created_at": datetime.utcnow(),
        }
        try:
            result = await database.notifications().insert_one(entry)
            ids.append(result.inserted_id)
        except Exception:
            logger.exception("Could not queue notification to %s", message.get("to"))
    return ids


async def enqueue_booking_notifications(booking: dict) -> list:
    return await enqueue(booking_messages(booking), booking_id=booking.get("_id"))


async def deliver(notification_id) -> bool:
    entry = await database.notifications().find_one_and_update(
        {"_id": notification_id, "status": PENDING},
        {"$set": {"status": SENDING, "claimed_at": datetime.utcnow()}, "$inc": {"attempts": 1}},
    )
    if not entry:
        return False

    try:
        await run_in_threadpool(email_service.send_email, entry["to"], entry["subject"], entry["body"])
    except Exception as e:
        logger.warning("Notification %s to %s failed: %s", notification_id, entry["to"], e)
        await database.notifications().update_one(
            {"_id": notification_id},
            {"$set": {"status": FAILED, "error": str(e), "finished_at": datetime.utcnow()}},
        )
        return False

    await database.notifications().update_one(
        {"_id": notification_id},
        {"$set": {"status": SENT, "finished_at": datetime.utcnow()}},
    )
    return True


async def deliver_many(ids: list) -> int:
    sent = 0
    for notification_id in ids:
        try:
            if await deliver(notification_id):
                sent += 1
        except Exception:
            logger.exception("Delivery of notification %s crashed", notification_id)
    return sent


async def deliver_pending(older_than_seconds: int = 0, limit: int = 100) -> int:
    """Send outbox entries still pending after ``older_than_seconds``."""
    cutoff = datetime.utcnow() - timedelta(seconds=older_than_seconds)
    entries = await database.notifications().find(
        {"status": PENDING, "created_at": {"$lte": cutoff}}, {"_id": 1}
    ).to_list(limit)
    return await deliver_many([e["_id"] for e in entries])
