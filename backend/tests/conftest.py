"""
Shared fixtures: in-memory MongoDB, captured mail, HTTP client and users.
"""
from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from app.main import app
from app.utils.auth_utils import create_access_token
from stayvista.db import database
from stayvista.service import email_service

ADMIN = "admin@x.com"
HOST = "host@x.com"
OTHER_HOST = "other-host@x.com"
GUEST = "g@x.com"

ROOM_PAYLOAD = {
    "location": "Cox's Bazar",
    "category": "Beach",
    "title": "Sea view cabin",
    "price": 100,
    "guests": 2,
    "bathrooms": 1,
    "bedrooms": 1,
    "description": "Right on the beach",
    "image": "https://i.ibb.co/cabin.jpg",
    "from": "2026-11-01T00:00:00",
    "to": "2026-11-10T00:00:00",
}


def auth_headers(email: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'email': email})}"}


@pytest.fixture(autouse=True)
def mock_db():
    db = AsyncMongoMockClient()["stayvista_test"]
    database.init_db(db)
    yield db
    database.init_db(None)


@pytest.fixture(autouse=True)
def sent_mail(monkeypatch):
    """Replaces the SMTP transport; every delivered message lands here."""
    sent = []

    def fake_send(to_email, subject, html_body):
        sent.append({"to": to_email, "subject": subject, "body": html_body})

    monkeypatch.setattr(email_service, "send_email", fake_send)
    return sent


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def users(mock_db):
    """Admin, two hosts and a guest already in the directory."""
    since = datetime(2026, 1, 15, 9, 30)
    docs = [
        {"email": ADMIN, "name": "Admin", "role": "admin", "status": "Verified", "timestamp": since},
        {"email": HOST, "name": "Host", "photo": "https://i.ibb.co/host.jpg",
         "role": "host", "status": "Verified", "timestamp": since},
        {"email": OTHER_HOST, "name": "Other Host", "role": "host", "status": "Verified", "timestamp": since},
        {"email": GUEST, "name": "Guest", "role": "guest", "status": "none", "timestamp": since},
    ]
    await mock_db["users"].insert_many(docs)
    return {d["email"]: d for d in docs}


@pytest.fixture
async def room(client, users):
    """Room R1 listed by HOST at price 100."""
    response = await client.post("/room", json=ROOM_PAYLOAD, headers=auth_headers(HOST))
    assert response.status_code == 200
    return response.json()


def booking_payload(room: dict, **overrides) -> dict:
    payload = {
        "roomId": room["_id"],
        "guest": {"email": GUEST, "name": "Guest"},
        "price": room["price"],
        "transactionId": "tx1",
        "date": "2026-10-19T12:00:00",
        "title": room["title"],
        "location": room["location"],
    }
    payload.update(overrides)
    return payload
