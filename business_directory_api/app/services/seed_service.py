"""
Loading of the sample catalog.

``seed_sample_businesses`` is idempotent: the first call on a database
replaces all businesses with the catalog from ``sample_catalog`` and
records the flag ``has_loaded_initial_data``; later calls do nothing
unless ``force`` is given.  With ``keep_owned`` only the catalog rows
are written (by id) and listings created by users are left alone.
"""

import logging
from datetime import datetime, timezone
from typing import List

from ..schemas.business import Business, BusinessCategory, Coordinate
from .entity_store import EntityStore
from .sample_catalog import SAMPLE_BUSINESSES

logger = logging.getLogger(__name__)

INITIAL_DATA_FLAG = "has_loaded_initial_data"


def sample_businesses() -> List[Business]:
    """Build the catalog records, stamped with the current time."""
    now = datetime.now(timezone.utc)
    businesses = []
    for entry in SAMPLE_BUSINESSES:
        latitude, longitude = entry["location"]
        businesses.append(
            Business(
                **{key: value for key, value in entry.items() if key not in ("location", "category")},
                category=BusinessCategory.parse(entry["category"]),
                location=Coordinate(latitude=latitude, longitude=longitude),
                created_at=now,
                updated_at=now,
            )
        )
    return businesses


def seed_sample_businesses(store: EntityStore, force: bool = False, keep_owned: bool = False) -> int:
    """Load the sample catalog once per database.

    Returns the number of catalog businesses written, ``0`` when the
    catalog was already loaded and ``force`` is false.
    """
    if not force and store.get_flag(INITIAL_DATA_FLAG) == "1":
        logger.info("Sample catalog already loaded, skipping")
        return 0
    businesses = sample_businesses()
    if keep_owned:
        for business in businesses:
            store.upsert_business(business)
    else:
        store.delete_all_businesses()
        for business in businesses:
            store.add_business(business)
    store.set_flag(INITIAL_DATA_FLAG, "1")
    logger.info("Loaded %d sample businesses", len(businesses))
    return len(businesses)
