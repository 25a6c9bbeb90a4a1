from __future__ import annotations

import math
import re

EARTH_RADIUS_M = 6_371_000

# "650 м", "1.2 км", "1,2 км"; the unit must directly follow the number
_DISTANCE_RE = re.compile(r"(\d+(?:[.,]\d+)?)\s*(км|м)(?![а-яё])", re.IGNORECASE)


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in meters."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def parse_distance_label(text: str | None) -> float:
    """Convert a label like "650 м" or "1.2 км" to meters.

    Anything without a recognisable number+unit pair counts as 0 m, so a
    malformed label never breaks filtering or statistics.
    """
    if not text:
        return 0.0
    match = _DISTANCE_RE.search(text)
    if not match:
        return 0.0
    value = float(match.group(1).replace(",", "."))
    if match.group(2).lower() == "км":
        return value * 1000
    return value


def format_distance_label(meters: float) -> str:
    if meters < 1000:
        return f"{int(round(meters))} м"
    km = round(meters / 1000, 1)
    if km == int(km):
        return f"{int(km)} км"
    return f"{km} км"
