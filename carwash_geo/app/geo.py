from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from .config import config

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class GeoPoint:
    """A GeoJSON point. Coordinates are stored ``[longitude, latitude]``."""

    longitude: float
    latitude: float

    def to_geojson(self) -> dict[str, Any]:
        return {"type": "Point", "coordinates": [self.longitude, self.latitude]}

    @classmethod
    def from_geojson(cls, doc: Optional[dict[str, Any]]) -> Optional["GeoPoint"]:
        if not doc or doc.get("type") != "Point":
            return None
        coordinates = doc.get("coordinates") or []
        if len(coordinates) < 2:
            return None
        return cls(longitude=float(coordinates[0]), latitude=float(coordinates[1]))


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    lat1_rad, lat2_rad = math.radians(lat1), math.radians(lat2)
    d_lat = lat2_rad - lat1_rad
    d_lng = math.radians(lng2 - lng1)
    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(d_lng / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def estimate_travel_minutes(distance_km: float, speed_kmh: Optional[float] = None) -> int:
    speed = speed_kmh or config.AVERAGE_SPEED_KMH
    return int(math.ceil(distance_km * 60 / speed))


def is_within_service_range(user: GeoPoint, carwash: GeoPoint, service_range_minutes: int) -> bool:
    distance = haversine_km(user.latitude, user.longitude, carwash.latitude, carwash.longitude)
    return estimate_travel_minutes(distance) <= service_range_minutes
