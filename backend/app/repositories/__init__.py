from app.repositories.base import ListingQuery, ListingRepository
from app.repositories.memory import InMemoryListingRepository
from app.repositories.sql import SqlListingRepository

__all__ = [
    "ListingQuery",
    "ListingRepository",
    "InMemoryListingRepository",
    "SqlListingRepository",
]
