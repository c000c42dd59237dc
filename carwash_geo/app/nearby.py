"""Location-based carwash lookups served by the 2dsphere indexes."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pymongo.collection import Collection

from .config import config
from .geo import GeoPoint, estimate_travel_minutes, haversine_km

logger = logging.getLogger(__name__)

SEARCH_NEARBY = "nearby"
SEARCH_EXTENDED = "extended"
SEARCH_ALL = "all"


def near_query(lat: float, lng: float, max_km: float) -> dict[str, Any]:
    return {
        "location": {
            "$near": {
                "$geometry": GeoPoint(longitude=lng, latitude=lat).to_geojson(),
                "$maxDistance": max_km * 1000,
            }
        },
        "is_active": True,
        "has_location": True,
    }


def with_distance(doc: dict[str, Any], user: GeoPoint) -> dict[str, Any]:
    point = GeoPoint.from_geojson(doc.get("location")) if doc.get("has_location") else None
    if point is None:
        return {
            "carwash": doc,
            "distance_km": None,
            "estimated_travel_time_minutes": None,
            "is_within_service_range": False,
        }
    distance = haversine_km(user.latitude, user.longitude, point.latitude, point.longitude)
    travel = estimate_travel_minutes(distance)
    service_range = doc.get("service_range_minutes")
    return {
        "carwash": doc,
        "distance_km": round(distance, 2),
        "estimated_travel_time_minutes": travel,
        "is_within_service_range": bool(service_range) and travel <= service_range,
    }


def find_carwashes_with_fallback(coll: Collection, lat: float, lng: float) -> tuple[list[dict[str, Any]], str]:
    """Widen the search until something is found.

    Tries active carwashes within ``NEARBY_RADIUS_KM``, then within
    ``EXTENDED_RADIUS_KM``, then every active carwash regardless of location.
    """
    user = GeoPoint(longitude=lng, latitude=lat)
    tiers = ((SEARCH_NEARBY, config.NEARBY_RADIUS_KM), (SEARCH_EXTENDED, config.EXTENDED_RADIUS_KM))
    for search_type, radius_km in tiers:
        docs = list(coll.find(near_query(lat, lng, radius_km)).limit(config.SEARCH_LIMIT))
        logger.info("%s search within %skm returned %d carwashes", search_type, radius_km, len(docs))
        if docs:
            return [with_distance(doc, user) for doc in docs], search_type

    # no geo ordering without $near, so rank every active carwash before limiting
    results = [with_distance(doc, user) for doc in coll.find({"is_active": True})]
    results.sort(key=lambda item: (item["distance_km"] is None, item["distance_km"] or 0))
    return results[: config.SEARCH_LIMIT], SEARCH_ALL


def search_message(search_type: str, count: int) -> str:
    if search_type == SEARCH_NEARBY:
        if count == 0:
            return "No car washes found nearby. Expanding search radius..."
        return f"Found {count} car washes within {config.NEARBY_RADIUS_KM:g}km"
    if search_type == SEARCH_EXTENDED:
        if count == 0:
            return "No car washes found in the extended area. Showing all available locations..."
        return f"Found {count} car washes within {config.EXTENDED_RADIUS_KM:g}km"
    if search_type == SEARCH_ALL:
        if count == 0:
            return "No car washes available at this time."
        return f"Showing all {count} available car washes"
    return f"Found {count} car washes"


def nearby_carwashes(coll: Collection, lat: float, lng: float) -> dict[str, Any]:
    carwashes, search_type = find_carwashes_with_fallback(coll, lat, lng)
    return {
        "carwashes": carwashes,
        "search_type": search_type,
        "user_lat": lat,
        "user_lng": lng,
        "count": len(carwashes),
        "message": search_message(search_type, len(carwashes)),
    }


def id_filter(carwash_id: str) -> dict[str, Any]:
    # seeded documents may carry string ids, app-created ones ObjectIds
    if ObjectId.is_valid(carwash_id):
        return {"_id": {"$in": [carwash_id, ObjectId(carwash_id)]}}
    return {"_id": carwash_id}


def update_carwash_location(coll: Collection, carwash_id: str, payload: dict[str, Any]) -> bool:
    update: dict[str, Any] = {
        "location": GeoPoint(longitude=payload["longitude"], latitude=payload["latitude"]).to_geojson(),
        "service_range_minutes": payload["service_range_minutes"],
        "has_location": True,
        "updated_at": datetime.now(timezone.utc),
    }
    address: Optional[str] = payload.get("address")
    if address:
        update["address"] = address
    result = coll.update_one(id_filter(carwash_id), {"$set": update})
    return bool(result.matched_count)
