"""Load carwash documents from a JSON file into MongoDB.

Each document is validated before insert; ``has_location`` is derived from
whether a GeoJSON ``location`` is present. Re-running skips duplicates.
"""

from __future__ import annotations

import argparse
import json
import logging
import pathlib
from datetime import datetime, timezone
from typing import Any

from marshmallow import ValidationError
from pymongo.collection import Collection
from pymongo.errors import BulkWriteError

from carwash_geo.app.db import carwashes
from carwash_geo.app.validators import CarwashSeedSchema

logger = logging.getLogger(__name__)

DEFAULT_DATASET = "data/carwashes.json"


def load_json(path: pathlib.Path) -> list[dict[str, Any]]:
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
        if isinstance(data, list):
            return data
        raise ValueError(f"Expected list in {path}")


def prepare(docs: list[dict[str, Any]]) -> list[dict[str, Any]]:
    schema = CarwashSeedSchema()
    now = datetime.now(timezone.utc)
    prepared = []
    for position, raw in enumerate(docs):
        try:
            doc = schema.load(raw)
        except ValidationError as exc:
            raise ValueError(f"Invalid carwash at position {position}: {exc.messages}") from exc
        doc.setdefault("created_at", now)
        doc.setdefault("updated_at", now)
        prepared.append(doc)
    return prepared


def import_carwashes(coll: Collection, docs: list[dict[str, Any]]) -> int:
    if not docs:
        return 0
    try:
        result = coll.insert_many(docs, ordered=False)
        inserted = len(result.inserted_ids)
        print(f"Imported {inserted} documents into {coll.name}")
    except BulkWriteError as exc:
        inserted = exc.details.get("nInserted", 0) if exc.details else 0
        print(f"Inserted {inserted} documents into {coll.name}; duplicates skipped")
    return inserted


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    parser = argparse.ArgumentParser(description="Seed the carwash collection from a JSON list.")
    parser.add_argument("path", nargs="?", default=DEFAULT_DATASET, help="JSON file, relative to the working directory")
    args = parser.parse_args(argv)
    path = pathlib.Path.cwd() / args.path
    if not path.exists():
        print(f"Skipping carwashes: {path} not found")
        return
    docs = prepare(load_json(path))
    logger.info("Validated %d carwash documents from %s", len(docs), path)
    import_carwashes(carwashes(), docs)


if __name__ == "__main__":
    main()
