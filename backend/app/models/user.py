# app/models/user.py
from datetime import datetime

from pymongo import ReturnDocument

from stayvista.core.config import settings
from stayvista.core.error_messages import ErrorMessages
from stayvista.core.exceptions import NotFound
from stayvista.db import database
from stayvista.serialize import serialize_doc, serialize_list


async def find_by_email(email: str):
    user = await database.users().find_one({"email": email})
    return serialize_doc(user)


async def get_user(email: str):
    user = await find_by_email(email)
    if not user:
        raise NotFound(ErrorMessages.USER_NOT_FOUND)
    return user


async def upsert_user(data: dict):
    """Store a user on first sign-in.

    An existing record is only touched when the payload asks for host
    verification (``status == "Requested"``); any other payload leaves it as is.
    Role is never taken from the payload.
    """
    email = data["email"]
    existing = await database.users().find_one({"email": email})

    if existing:
        if data.get("status") == "Requested":
            existing = await database.users().find_one_and_update(
                {"email": email},
                {"$set": {"status": "Requested"}},
                return_document=ReturnDocument.AFTER,
            )
        return serialize_doc(existing)

    is_admin = bool(settings.ADMIN_EMAIL) and email.lower() == settings.ADMIN_EMAIL.lower()
    new_user = {
        "email": email,
        "name": data.get("name"),
        "photo": data.get("photo"),
        "role": "admin" if is_admin else "guest",
        "status": "Requested" if data.get("status") == "Requested" else "none",
        "timestamp": datetime.utcnow(),
    }
    # upsert guards against two first sign-ins racing each other
    await database.users().update_one(
        {"email": email}, {"$setOnInsert": new_user}, upsert=True
    )
    return await find_by_email(email)


async def update_role(email: str, role: str, status: str):
    user = await database.users().find_one_and_update(
        {"email": email},
        {"$set": {"role": role, "status": status, "timestamp": datetime.utcnow()}},
        return_document=ReturnDocument.AFTER,
    )
    if not user:
        raise NotFound(ErrorMessages.USER_NOT_FOUND)
    return serialize_doc(user)


async def list_users():
    users = await database.users().find({}).to_list(None)
    return serialize_list(users)


async def count_users() -> int:
    return await database.users().count_documents({})
