from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, jsonify, request
from marshmallow import ValidationError

from ..db import carwashes
from ..nearby import nearby_carwashes, update_carwash_location
from ..utils import error_response, validation_details
from ..validators import CoordinatesSchema, LocationUpdateSchema

logger = logging.getLogger(__name__)

carwashes_bp = Blueprint("carwashes", __name__, url_prefix="/api/v1")


@carwashes_bp.get("/carwashes/nearby")
def carwashes_nearby():
    if request.args.get("lat") is None or request.args.get("lng") is None:
        return error_response("VALIDATION_ERROR", "lat and lng query parameters are required", 422)
    try:
        coords = CoordinatesSchema().load({"lat": request.args["lat"], "lng": request.args["lng"]})
    except ValidationError as exc:
        return error_response("VALIDATION_ERROR", "Invalid coordinates", 422, validation_details(exc))

    logger.info("Nearby carwash search at lat=%s lng=%s", coords["lat"], coords["lng"])
    result = nearby_carwashes(carwashes(), coords["lat"], coords["lng"])
    result["carwashes"] = [
        {**item, "carwash": serialize_carwash(item["carwash"])} for item in result["carwashes"]
    ]
    return jsonify(result)


@carwashes_bp.put("/carwashes/<carwash_id>/location")
def update_location(carwash_id: str):
    data = request.get_json(silent=True) or {}
    try:
        payload = LocationUpdateSchema().load(data)
    except ValidationError as exc:
        return error_response("VALIDATION_ERROR", "Invalid location payload", 422, validation_details(exc))

    if not update_carwash_location(carwashes(), carwash_id, payload):
        return error_response("NOT_FOUND", "Carwash not found", 404)
    return jsonify({"message": "Location updated successfully", "carwash_id": carwash_id})


def serialize_carwash(doc: dict[str, Any]) -> dict[str, Any]:
    return {
        "_id": str(doc.get("_id")),
        "name": doc.get("name"),
        "address": doc.get("address"),
        "location": doc.get("location"),
        "is_active": doc.get("is_active"),
        "has_location": doc.get("has_location", False),
        "service_range_minutes": doc.get("service_range_minutes"),
    }
