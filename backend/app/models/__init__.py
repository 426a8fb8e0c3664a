from app.models.listing import Listing, ListingStatus

__all__ = [
    "Listing",
    "ListingStatus",
]
