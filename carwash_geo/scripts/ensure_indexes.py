"""CLI utility to create the geospatial indexes on the carwash collection."""

import logging

from carwash_geo.app.db import carwashes
from carwash_geo.app.indexes import CONFIRMATION_MESSAGES, ensure_geo_indexes


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    coll = carwashes()
    for index in ensure_geo_indexes(coll):
        print(f"Index on {coll.name}: {index['name']} key={dict(index['key'])}")
    for message in CONFIRMATION_MESSAGES:
        print(message)


if __name__ == "__main__":
    main()
