from __future__ import annotations

from typing import Any

from marshmallow import INCLUDE, Schema, ValidationError, fields, post_load, validate, validates, validates_schema


class GeoPointSchema(Schema):
    type = fields.String(required=True, validate=validate.Equal("Point"))
    coordinates = fields.List(fields.Float(), required=True, validate=validate.Length(equal=2))

    @validates("coordinates")
    def validate_coordinates(self, value: list[float], **kwargs: Any) -> None:
        longitude, latitude = value
        if not -180 <= longitude <= 180:
            raise ValidationError("Longitude must be between -180 and 180")
        if not -90 <= latitude <= 90:
            raise ValidationError("Latitude must be between -90 and 90")


class CoordinatesSchema(Schema):
    lat = fields.Float(required=True, validate=validate.Range(min=-90, max=90))
    lng = fields.Float(required=True, validate=validate.Range(min=-180, max=180))


class LocationUpdateSchema(Schema):
    latitude = fields.Float(required=True, validate=validate.Range(min=-90, max=90))
    longitude = fields.Float(required=True, validate=validate.Range(min=-180, max=180))
    service_range_minutes = fields.Integer(required=True, validate=validate.Range(min=1, max=180))
    address = fields.String(load_default=None)


class CarwashSeedSchema(Schema):
    class Meta:
        # full carwash exports carry services, rating, open_hours and the like
        unknown = INCLUDE

    _id = fields.String()
    name = fields.String(required=True, validate=validate.Length(min=1))
    address = fields.String()
    location = fields.Nested(GeoPointSchema)
    is_active = fields.Boolean(load_default=True)
    service_range_minutes = fields.Integer(validate=validate.Range(min=1, max=180))

    @validates_schema
    def validate_range_needs_location(self, data: dict[str, Any], **kwargs: Any) -> None:
        if "service_range_minutes" in data and "location" not in data:
            raise ValidationError("service_range_minutes requires a location", "service_range_minutes")

    @post_load
    def derive_has_location(self, data: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        data["has_location"] = "location" in data
        return data
