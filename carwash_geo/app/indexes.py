"""Geospatial index provisioning for the carwash collection."""

from __future__ import annotations

import logging
from typing import Any, Dict

from pymongo import ASCENDING, GEOSPHERE
from pymongo.collection import Collection

logger = logging.getLogger(__name__)

LOCATION_INDEX: list[tuple[str, Any]] = [("location", GEOSPHERE)]
ACTIVE_LOCATION_INDEX: list[tuple[str, Any]] = [
    ("location", GEOSPHERE),
    ("is_active", ASCENDING),
    ("has_location", ASCENDING),
]

CONFIRMATION_MESSAGES = (
    "Geospatial indexes created successfully!",
    "You can now use $near, $geoWithin, and other geospatial queries on the location field.",
)


def ensure_geo_indexes(coll: Collection) -> list[Dict[str, Any]]:
    """Create the carwash location indexes and return the collection's index list.

    Requests are issued in order: the single-field 2dsphere index, the
    compound ``(location, is_active, has_location)`` index, then the listing.
    Re-running is a no-op on the server side. Driver errors propagate.
    """
    for keys in (LOCATION_INDEX, ACTIVE_LOCATION_INDEX):
        name = coll.create_index(keys)
        logger.info("Ensured index %s on %s", name, coll.name)

    indexes = list(coll.list_indexes())
    for index in indexes:
        logger.debug("Index on %s: %s key=%s", coll.name, index.get("name"), dict(index["key"]))
    return indexes
