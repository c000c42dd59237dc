import os

import mongomock
import pytest

# === Configure env BEFORE any imports ===
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/carwash_test")
os.environ.setdefault("CARWASH_COLLECTION", "carwashes")
os.environ.setdefault("NEARBY_RADIUS_KM", "10")
os.environ.setdefault("EXTENDED_RADIUS_KM", "100")

from carwash_geo.app.geo import haversine_km  # noqa: E402


@pytest.fixture
def mock_db(monkeypatch):
    """Point the module-level database getters at a fresh mongomock database."""
    import carwash_geo.app.db as db_mod

    mock_client = mongomock.MongoClient()
    mock_db = mock_client["carwash_test"]
    monkeypatch.setattr(db_mod, "get_client", lambda: mock_client)
    monkeypatch.setattr(db_mod, "get_db", lambda: mock_db)
    return mock_db


@pytest.fixture
def carwash_coll(mock_db):
    return mock_db["carwashes"]


class _FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def limit(self, n):
        return _FakeCursor(self._docs[:n])

    def __iter__(self):
        return iter(self._docs)


class FakeGeoCollection:
    """Evaluates ``$near`` with haversine distances; mongomock has no geo operators."""

    name = "carwashes"

    def __init__(self, docs):
        self.docs = docs
        self.queries = []

    def find(self, query):
        self.queries.append(query)
        matches = [doc for doc in self.docs if doc.get("is_active") == query.get("is_active", doc.get("is_active"))]
        near = query.get("location", {}).get("$near")
        if near is None:
            return _FakeCursor(matches)
        lng, lat = near["$geometry"]["coordinates"]
        max_m = near["$maxDistance"]
        ranked = []
        for doc in matches:
            if not doc.get("has_location") or "location" not in doc:
                continue
            d_lng, d_lat = doc["location"]["coordinates"]
            distance_m = haversine_km(lat, lng, d_lat, d_lng) * 1000
            if distance_m <= max_m:
                ranked.append((distance_m, doc))
        ranked.sort(key=lambda pair: pair[0])
        return _FakeCursor([doc for _, doc in ranked])


def carwash_doc(_id, lng=None, lat=None, is_active=True, service_range_minutes=None):
    doc = {"_id": _id, "name": f"Carwash {_id}", "is_active": is_active, "has_location": lng is not None}
    if lng is not None:
        doc["location"] = {"type": "Point", "coordinates": [lng, lat]}
    if service_range_minutes is not None:
        doc["service_range_minutes"] = service_range_minutes
    return doc


@pytest.fixture
def geo_coll_factory():
    return FakeGeoCollection
