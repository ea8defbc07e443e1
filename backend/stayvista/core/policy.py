# stayvista/core/policy.py
"""Ownership and self-action rules shared by every route.

Each check takes the acting identity (a user record or token payload with an
``email`` and, for user records, a ``role``) and raises ``Forbidden`` when the
action is not allowed.
"""
from stayvista.core.error_messages import ErrorMessages
from stayvista.core.exceptions import Forbidden


def is_admin(identity: dict) -> bool:
    return identity.get("role") == "admin"


def ensure_not_self(actor_email: str, target_email: str):
    """Nobody may change their own role, whatever role they hold."""
    if actor_email and actor_email.lower() == (target_email or "").lower():
        raise Forbidden(ErrorMessages.SELF_ROLE_CHANGE)


def ensure_same_email(identity: dict, email: str):
    if is_admin(identity):
        return
    if identity.get("email") != email:
        raise Forbidden(ErrorMessages.OTHER_USER_DATA)


def ensure_room_owner(room: dict, identity: dict):
    if is_admin(identity):
        return
    host = room.get("host") or {}
    if host.get("email") != identity.get("email"):
        raise Forbidden(ErrorMessages.NOT_ROOM_OWNER)


def ensure_booking_party(booking: dict, identity: dict):
    if is_admin(identity):
        return
    email = identity.get("email")
    guest = booking.get("guest") or {}
    host = booking.get("host") or {}
    if email not in (guest.get("email"), host.get("email")):
        raise Forbidden(ErrorMessages.NOT_BOOKING_PARTY)
