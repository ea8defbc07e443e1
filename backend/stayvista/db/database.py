# stayvista/db/database.py
from motor.motor_asyncio import AsyncIOMotorClient

from stayvista.core.config import settings

_client = None
_db = None


def get_db():
    """Return the active database, connecting from settings on first use."""
    global _client, _db
    if _db is None:
        _client = AsyncIOMotorClient(settings.MONGO_URL)
        _db = _client[settings.MONGO_DB_NAME]
    return _db


def init_db(database):
    """Swap in an already-built database handle (tests, scripts)."""
    global _db
    _db = database
    return _db


def close_db():
    global _client, _db
    if _client is not None:
        _client.close()
    _client = None
    _db = None


def users():
    return get_db()["users"]


def rooms():
    return get_db()["rooms"]


def bookings():
    return get_db()["bookings"]


def notifications():
    return get_db()["notifications"]
