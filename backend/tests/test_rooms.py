"""
Room catalog: listing, ownership and the booked flag.
"""
import json

from conftest import ADMIN, GUEST, HOST, OTHER_HOST, ROOM_PAYLOAD, auth_headers


class TestCreateAndRead:

    async def test_host_creates_room(self, client, users, mock_db):
        response = await client.post("/room", json=ROOM_PAYLOAD, headers=auth_headers(HOST))
        assert response.status_code == 200
        room = response.json()
        assert room["booked"] is False
        assert room["host"] == {"email": HOST, "name": "Host", "image": "https://i.ibb.co/host.jpg"}
        assert room["from"].startswith("2026-11-01")
        assert await mock_db["rooms"].count_documents({}) == 1

    async def test_host_field_cannot_be_spoofed(self, client, users):
        payload = {**ROOM_PAYLOAD, "host": {"email": OTHER_HOST}, "booked": True}
        room = (await client.post("/room", json=payload, headers=auth_headers(HOST))).json()
        assert room["host"]["email"] == HOST
        assert room["booked"] is False

    async def test_window_must_be_ordered(self, client, users):
        payload = {**ROOM_PAYLOAD, "from": "2026-11-10T00:00:00", "to": "2026-11-01T00:00:00"}
        response = await client.post("/room", json=payload, headers=auth_headers(HOST))
        assert response.status_code == 422

    async def test_get_room(self, client, room):
        response = await client.get(f"/room/{room['_id']}")
        assert response.status_code == 200
        assert response.json()["title"] == ROOM_PAYLOAD["title"]

    async def test_get_room_bad_id(self, client):
        assert (await client.get("/room/not-an-id")).status_code == 400
        assert (await client.get("/room/64b7f0c2a1b2c3d4e5f60718")).status_code == 404


class TestListing:

    async def test_category_filter(self, client, users):
        headers = auth_headers(HOST)
        await client.post("/room", json=ROOM_PAYLOAD, headers=headers)
        await client.post("/room", json={**ROOM_PAYLOAD, "category": "Mountain"}, headers=headers)

        assert len((await client.get("/rooms")).json()) == 2
        assert len((await client.get("/rooms", params={"category": "null"})).json()) == 2
        beach = (await client.get("/rooms", params={"category": "Beach"})).json()
        assert [r["category"] for r in beach] == ["Beach"]

    async def test_my_listings(self, client, room, users):
        await client.post("/room", json=ROOM_PAYLOAD, headers=auth_headers(OTHER_HOST))
        response = await client.get(f"/my-listings/{HOST}", headers=auth_headers(HOST))
        assert response.status_code == 200
        assert [r["_id"] for r in response.json()] == [room["_id"]]

    async def test_my_listings_of_other_host(self, client, room):
        response = await client.get(f"/my-listings/{HOST}", headers=auth_headers(OTHER_HOST))
        assert response.status_code == 403


class TestUpdateAndDelete:

    async def test_owner_updates(self, client, room):
        response = await client.put(f"/room/update/{room['_id']}",
                                    json={"title": "Renovated", "price": 150},
                                    headers=auth_headers(HOST))
        assert response.status_code == 200
        assert response.json()["title"] == "Renovated"
        assert response.json()["price"] == 150
        assert response.json()["host"]["email"] == HOST

    async def test_other_host_cannot_update(self, client, room, mock_db):
        response = await client.put(f"/room/update/{room['_id']}", json={"title": "Mine now"},
                                    headers=auth_headers(OTHER_HOST))
        assert response.status_code == 403
        stored = await mock_db["rooms"].find_one({})
        assert stored["title"] == ROOM_PAYLOAD["title"]

    async def test_admin_can_update(self, client, room):
        response = await client.put(f"/room/update/{room['_id']}", json={"title": "Moderated"},
                                    headers=auth_headers(ADMIN))
        assert response.status_code == 200

    async def test_other_host_cannot_delete(self, client, room, mock_db):
        response = await client.delete(f"/roommm/{room['_id']}", headers=auth_headers(OTHER_HOST))
        assert response.status_code == 403
        assert await mock_db["rooms"].count_documents({}) == 1

    async def test_owner_deletes(self, client, room, mock_db):
        response = await client.delete(f"/roommm/{room['_id']}", headers=auth_headers(HOST))
        assert response.status_code == 200
        assert await mock_db["rooms"].count_documents({}) == 0

    async def test_toggle_booked_flag(self, client, room, mock_db):
        response = await client.patch(f"/room/status/{room['_id']}", json={"status": True},
                                      headers=auth_headers(GUEST))
        assert response.status_code == 200
        assert (await mock_db["rooms"].find_one({}))["booked"] is True

    async def test_toggle_missing_room(self, client, users):
        response = await client.patch("/room/status/64b7f0c2a1b2c3d4e5f60718", json={"status": True},
                                      headers=auth_headers(GUEST))
        assert response.status_code == 404


class TestRoomValidation:

    async def test_infinite_price_rejected_on_create(self, client, users, mock_db):
        body = json.dumps({**ROOM_PAYLOAD, "price": 1}).replace('"price": 1', '"price": Infinity')
        response = await client.post("/room", content=body,
                                     headers={**auth_headers(HOST), "Content-Type": "application/json"})
        assert response.status_code == 422
        assert await mock_db["rooms"].count_documents({}) == 0

    async def test_infinite_price_rejected_on_update(self, client, room, mock_db):
        response = await client.put(f"/room/update/{room['_id']}", content='{"price": Infinity}',
                                    headers={**auth_headers(HOST), "Content-Type": "application/json"})
        assert response.status_code == 422
        assert (await mock_db["rooms"].find_one({}))["price"] == 100

    async def test_update_window_both_ends_reversed(self, client, room):
        response = await client.put(f"/room/update/{room['_id']}",
                                    json={"from": "2026-11-20T00:00:00", "to": "2026-11-05T00:00:00"},
                                    headers=auth_headers(HOST))
        assert response.status_code == 422

    async def test_update_to_before_stored_from(self, client, room, mock_db):
        response = await client.put(f"/room/update/{room['_id']}",
                                    json={"to": "2026-10-25T00:00:00"},
                                    headers=auth_headers(HOST))
        assert response.status_code == 400
        assert response.json()["message"] == "'to' must not be before 'from'"
        stored = await mock_db["rooms"].find_one({})
        assert stored["to"].day == 10

    async def test_update_from_after_stored_to(self, client, room):
        response = await client.put(f"/room/update/{room['_id']}",
                                    json={"from": "2026-11-15T00:00:00Z"},
                                    headers=auth_headers(HOST))
        assert response.status_code == 400

    async def test_update_window_inside_range(self, client, room):
        response = await client.put(f"/room/update/{room['_id']}",
                                    json={"to": "2026-11-05T00:00:00"},
                                    headers=auth_headers(HOST))
        assert response.status_code == 200
        assert response.json()["to"].startswith("2026-11-05")
