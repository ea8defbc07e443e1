# stayvista/service/stats_service.py
from datetime import datetime, timezone
from typing import Iterable, List

from stayvista.db import database

CHART_HEADER = ["Day", "Sales"]


def _as_datetime(value):
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def day_label(value: datetime) -> str:
    return f"{value.day}/{value.month}"


def summarize_bookings(bookings: Iterable[dict]) -> dict:
    """Count, price total and a per-day sales series for a set of bookings.

    Bookings sharing a ``D/M`` label are summed into one row; rows follow
    booking date order. The header row is always present.
    """
    bookings = list(bookings)
    total_price = sum(b.get("price") or 0 for b in bookings)

    dated = []
    for b in bookings:
        when = _as_datetime(b.get("date"))
        if when is not None:
            dated.append((when, b.get("price") or 0))
    dated.sort(key=lambda item: item[0])

    series = {}
    for when, price in dated:
        label = day_label(when)
        series[label] = series.get(label, 0) + price

    chart_data: List[list] = [list(CHART_HEADER)]
    chart_data.extend([label, price] for label, price in series.items())

    return {
        "totalBookings": len(bookings),
        "totalPrice": total_price,
        "chartData": chart_data,
    }


async def booking_stats(query: dict) -> dict:
    cursor = database.bookings().find(query, {"date": 1, "price": 1})
    return summarize_bookings(await cursor.to_list(None))
