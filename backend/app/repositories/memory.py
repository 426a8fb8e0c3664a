from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from app.models.listing import Listing, ListingStatus
from app.repositories.base import ListingQuery, ListingRepository
from app.utils.object_id import generate_object_id


class InMemoryListingRepository(ListingRepository):
    """Dict-backed repository holding transient ``Listing`` instances."""

    def __init__(self) -> None:
        self._listings: dict[str, Listing] = {}

    def find(self, query: ListingQuery | None = None) -> list[Listing]:
        listings = list(self._listings.values())
        if query is None:
            return listings
        return [listing for listing in listings if query.matches(listing)]

    def find_by_id(self, listing_id: str) -> Listing | None:
        return self._listings.get(listing_id)

    def create(self, fields: dict[str, Any]) -> Listing:
        now = datetime.now(timezone.utc)
        listing = Listing(**fields)
        listing.id = generate_object_id()
        if listing.status is None:
            listing.status = ListingStatus.DRAFT.value
        listing.created_at = now
        listing.updated_at = now
        self._listings[listing.id] = listing
        return listing

    def find_by_id_and_update(self, listing_id: str, changes: dict[str, Any]) -> Listing | None:
        listing = self._listings.get(listing_id)
        if listing is None:
            return None
        for k, v in changes.items():
            setattr(listing, k, v)
        listing.updated_at = datetime.now(timezone.utc)
        return listing

    def find_by_id_and_delete(self, listing_id: str) -> Listing | None:
        return self._listings.pop(listing_id, None)

    def exists(self, query: ListingQuery) -> bool:
        return any(query.matches(listing) for listing in self._listings.values())
