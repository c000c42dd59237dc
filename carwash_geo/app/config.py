from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017/carwash")
    MONGO_DB: str = os.getenv("MONGO_DB", "carwash")
    CARWASH_COLLECTION: str = os.getenv("CARWASH_COLLECTION", "carwashes")
    SERVER_SELECTION_TIMEOUT_MS: int = int(os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "8000"))

    NEARBY_RADIUS_KM: float = float(os.getenv("NEARBY_RADIUS_KM", "10"))
    EXTENDED_RADIUS_KM: float = float(os.getenv("EXTENDED_RADIUS_KM", "100"))
    SEARCH_LIMIT: int = int(os.getenv("SEARCH_LIMIT", "50"))
    # average city driving speed used for travel estimates
    AVERAGE_SPEED_KMH: float = float(os.getenv("AVERAGE_SPEED_KMH", "30"))


config = Config()
