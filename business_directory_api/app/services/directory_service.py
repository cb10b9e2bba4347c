"""
Business logic for the business directory.

``DirectoryService`` keeps the in-memory list of businesses that the
explore screen works with.  The list is rebuilt from the store as a
whole on every ``refresh``; the service subscribes ``refresh`` to the
store's change notifications, so every committed write (made through
this service or any other holder of the store) is reflected in the
cache before the writing call returns.

Sorting is deterministic: each filter sorts by its own key and then by
business id.
"""

import logging
from typing import List, Optional

from ..core import geo
from ..schemas.business import (
    Business,
    BusinessCategory,
    BusinessFilter,
    Coordinate,
    default_image_for,
)
from .entity_store import EntityStore

logger = logging.getLogger(__name__)


def with_default_image(business: Business) -> Business:
    """Return ``business`` with the category default image if it has none."""
    if business.images:
        return business
    image = default_image_for(business.category)
    logger.info(
        "No images given for %s, using default %s for category %s",
        business.name,
        image,
        business.category.value,
    )
    return business.model_copy(update={"images": [image]})


class DirectoryService:
    """Cached, sortable view of all stored businesses."""

    def __init__(self, store: EntityStore, selected_filter: BusinessFilter = BusinessFilter.nearest):
        self.store = store
        self.businesses: List[Business] = []
        self.selected_filter = selected_filter
        self.user_location: Optional[Coordinate] = None
        store.subscribe(self.refresh)

    def close(self) -> None:
        """Stop following store changes."""
        self.store.unsubscribe(self.refresh)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _with_distance(self, business: Business) -> Business:
        if self.user_location is None:
            return business
        return business.model_copy(update={"distance": geo.distance(business.location, self.user_location)})

    def refresh(self) -> None:
        """Reload every business from the store and re-apply the sort."""
        fetched = self.store.fetch_businesses()
        self.businesses = [self._with_distance(b) for b in fetched]
        self.apply_filter()
        logger.debug("Directory refreshed: %d businesses", len(self.businesses))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, business: Business) -> Business:
        """Store a new business and return it as cached."""
        logger.info("Adding business %s", business.name)
        prepared = with_default_image(business)
        self.store.add_business(prepared)
        return self.get(prepared.id)

    def delete(self, business: Business) -> bool:
        """Remove a business by id; return whether it existed."""
        logger.info("Deleting business %s", business.id)
        return self.store.delete_business(business)

    def update(self, business: Business) -> Business:
        """Replace the stored record with ``business`` in one atomic write."""
        logger.info("Updating business %s", business.id)
        prepared = with_default_image(business)
        self.store.upsert_business(prepared)
        return self.get(prepared.id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, business_id: str) -> Business:
        """Return a cached business.  Raises ``ValueError`` if unknown."""
        for business in self.businesses:
            if business.id == business_id:
                return business
        raise ValueError(f"Business {business_id} not found")

    def owned_by(self, owner_id: str) -> List[Business]:
        return [b for b in self.businesses if b.owner_id == owner_id]

    def filtered(self, search_text: str = "", category: Optional[BusinessCategory] = None) -> List[Business]:
        """Businesses matching the search text and category.

        The text matches case-insensitively anywhere in the name or the
        description.  Empty text and a missing category do not filter.
        """
        result = self.businesses
        if search_text:
            needle = search_text.casefold()
            result = [
                b for b in result if needle in b.name.casefold() or needle in b.description.casefold()
            ]
        if category is not None:
            result = [b for b in result if b.category == category]
        return list(result)

    # ------------------------------------------------------------------
    # Sorting and location
    # ------------------------------------------------------------------

    def apply_filter(self) -> None:
        """Sort ``businesses`` in place according to ``selected_filter``.

        ``nearest`` leaves the order unchanged while no user location is
        known.
        """
        if self.selected_filter == BusinessFilter.nearest:
            location = self.user_location
            if location is None:
                return
            self.businesses.sort(key=lambda b: (geo.distance(b.location, location), b.id))
        elif self.selected_filter == BusinessFilter.top_rated:
            self.businesses.sort(key=lambda b: (-b.rating, b.id))
        elif self.selected_filter == BusinessFilter.newest:
            self.businesses.sort(key=lambda b: (-b.created_at.timestamp(), b.id))

    def select_filter(self, selected_filter: BusinessFilter) -> None:
        self.selected_filter = selected_filter
        self.apply_filter()

    def set_user_location(self, location: Coordinate) -> None:
        """Remember the user's position and recompute every distance."""
        self.user_location = location
        self.businesses = [self._with_distance(b) for b in self.businesses]
        if self.selected_filter == BusinessFilter.nearest:
            self.apply_filter()
