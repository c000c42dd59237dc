import pytest

import carwash_geo.app.db as db_mod
from carwash_geo.app.config import config


@pytest.fixture
def fresh_client(monkeypatch):
    monkeypatch.setattr(db_mod, "_client", None)
    yield
    if db_mod._client is not None:
        db_mod._client.close()


@pytest.mark.parametrize(
    "uri, expected",
    [
        ("mongodb://localhost:27017/fleet", "fleet"),
        ("mongodb://localhost:27017/fleet?retryWrites=true", "fleet"),
        ("mongodb://localhost:27017", "carwash"),
        ("mongodb://localhost:27017/?retryWrites=true", "carwash"),
    ],
)
def test_database_name_from_uri(monkeypatch, fresh_client, uri, expected):
    monkeypatch.setattr(config, "MONGO_URI", uri)
    monkeypatch.setattr(config, "MONGO_DB", "carwash")
    assert db_mod.get_db().name == expected


def test_carwashes_uses_configured_collection(monkeypatch, fresh_client):
    monkeypatch.setattr(config, "MONGO_URI", "mongodb://localhost:27017")
    monkeypatch.setattr(config, "CARWASH_COLLECTION", "washes")
    assert db_mod.carwashes().name == "washes"
