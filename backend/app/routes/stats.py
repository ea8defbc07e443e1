# app/routes/stats.py
from fastapi import APIRouter, Depends

from app.middleware.rbac import get_current_admin, get_current_host, get_current_user
from app.models.room import count_rooms
from app.models.user import count_users
from app.schemas.stats import AdminStats, GuestStats, HostStats
from stayvista.service.stats_service import booking_stats

stats_router = APIRouter(tags=["Statistics"])


@stats_router.get("/admin-stat", response_model=AdminStats)
async def admin_stats(admin: dict = Depends(get_current_admin)):
    summary = await booking_stats({})
    return {
        **summary,
        "totalUsers": await count_users(),
        "totalRooms": await count_rooms(),
    }


@stats_router.get("/host-stat", response_model=HostStats)
async def host_stats(host: dict = Depends(get_current_host)):
    email = host["email"]
    summary = await booking_stats({"host.email": email})
    return {
        **summary,
        "totalRooms": await count_rooms(email),
        "hostSince": host.get("timestamp"),
    }


@stats_router.get("/guest-stat", response_model=GuestStats)
async def guest_stats(user: dict = Depends(get_current_user)):
    summary = await booking_stats({"guest.email": user["email"]})
    return {**summary, "guestSince": user.get("timestamp")}
