from __future__ import annotations

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from .config import config

_client: MongoClient | None = None

def get_client() -> MongoClient:
    global _client
    if _client is None:
        _client = MongoClient(
            config.MONGO_URI,
            serverSelectionTimeoutMS=config.SERVER_SELECTION_TIMEOUT_MS,
        )
    return _client


def get_db() -> Database:
    client = get_client()
    # URIs without a database path fall back to MONGO_DB
    return client.get_default_database(default=config.MONGO_DB)


def collection(name: str) -> Collection:
    return get_db()[name]


def carwashes() -> Collection:
    return collection(config.CARWASH_COLLECTION)
