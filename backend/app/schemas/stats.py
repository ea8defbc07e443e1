# schemas/stats.py
from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel

ChartRow = List[Union[str, float]]


class BookingSummary(BaseModel):
    totalBookings: int
    totalPrice: float
    chartData: List[ChartRow]


class AdminStats(BookingSummary):
    totalUsers: int
    totalRooms: int


class HostStats(BookingSummary):
    totalRooms: int
    hostSince: Optional[datetime] = None


class GuestStats(BookingSummary):
    guestSince: Optional[datetime] = None
