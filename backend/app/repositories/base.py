"""Persistence port for listings.

Services only talk to ``ListingRepository``; the SQLAlchemy implementation
backs the running app and the in-memory one backs unit tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from app.utils.object_id import is_valid_object_id

if TYPE_CHECKING:
    from app.models.listing import Listing


@dataclass
class ListingQuery:
    """Filter over listing attributes (model attribute names, not JSON names).

    ``equals`` must all match; when ``any_of`` is non-empty at least one of its
    entries must match; ``exclude_id`` drops a single record.
    """

    equals: dict[str, Any] = field(default_factory=dict)
    any_of: list[dict[str, Any]] = field(default_factory=list)
    exclude_id: str | None = None

    def matches(self, listing: Listing) -> bool:
        if self.exclude_id is not None and listing.id == self.exclude_id:
            return False
        if any(getattr(listing, k) != v for k, v in self.equals.items()):
            return False
        if self.any_of:
            return any(
                all(getattr(listing, k) == v for k, v in cond.items()) for cond in self.any_of
            )
        return True


class ListingRepository(ABC):
    @abstractmethod
    def find(self, query: ListingQuery | None = None) -> list[Listing]:
        ...

    @abstractmethod
    def find_by_id(self, listing_id: str) -> Listing | None:
        ...

    @abstractmethod
    def create(self, fields: dict[str, Any]) -> Listing:
        ...

    @abstractmethod
    def find_by_id_and_update(self, listing_id: str, changes: dict[str, Any]) -> Listing | None:
        """Apply ``changes`` and return the updated record, or None if absent."""
        ...

    @abstractmethod
    def find_by_id_and_delete(self, listing_id: str) -> Listing | None:
        """Remove the record and return it, or None if absent."""
        ...

    @abstractmethod
    def exists(self, query: ListingQuery) -> bool:
        ...

    def is_valid_id(self, value: Any) -> bool:
        return is_valid_object_id(value)
