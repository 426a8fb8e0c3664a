from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.models.listing import ListingStatus
from app.utils.object_id import is_valid_object_id

# Fields a draft may leave out; empty values for these are dropped before save.
DRAFT_OPTIONAL_FIELDS = (
    "location",
    "price",
    "description",
    "images",
    "address",
    "bedrooms",
    "bathrooms",
    "squareFootage",
    "propertyType",
    "yearBuilt",
    "parkingAvailable",
    "listingType",
    "availableFrom",
    "features",
    "amenities",
    "facilities",
    "slug",
)

NON_DRAFT_REQUIRED_FIELDS = (
    "title",
    "slug",
    "address",
    "location",
    "price",
    "description",
    "property_type",
    "listing_type",
)


def is_blank(value: Any) -> bool:
    """True for None, empty or whitespace-only strings, and empty lists."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


class ListingFields(BaseModel):
    """Listing attributes shared by the create and update payloads."""

    title: str | None = None
    slug: str | None = None
    address: str | None = None
    location: str | dict[str, Any] | None = None
    price: float | None = Field(default=None, ge=0)
    description: str | None = None
    images: list[str] | None = None
    bedrooms: int | None = Field(default=None, ge=0)
    bathrooms: float | None = Field(default=None, ge=0)
    square_footage: int | None = Field(default=None, ge=0)
    property_type: str | None = None
    year_built: int | None = Field(default=None, ge=1800, le=2100)
    parking_available: bool | None = None
    listing_type: str | None = None
    available_from: datetime | None = None
    features: list[str] | None = None
    amenities: list[str] | None = None
    facilities: list[str] | None = None
    tag: str | None = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("available_from")
    @classmethod
    def to_naive_utc(cls, value: datetime | None) -> datetime | None:
        # The column is naive and holds UTC; offsets are converted, not dropped.
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class ListingRecord(ListingFields):
    """A complete listing as it is about to be inserted.

    Drafts only get type checks; any other status must also carry the
    required content fields.
    """

    status: ListingStatus = ListingStatus.DRAFT
    created_by: str | None = None

    @field_validator("created_by")
    @classmethod
    def check_created_by(cls, value: str | None) -> str | None:
        if value is not None and not is_valid_object_id(value):
            raise ValueError("createdBy must be a valid identifier")
        return value.lower() if value else value

    @model_validator(mode="after")
    def require_content_unless_draft(self) -> ListingRecord:
        if self.status == ListingStatus.DRAFT:
            return self
        missing = [
            to_camel(name) for name in NON_DRAFT_REQUIRED_FIELDS if is_blank(getattr(self, name))
        ]
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")
        return self


class ListingUpdate(ListingFields):
    """Partial update. Only keys present in the request body are applied."""

    status: ListingStatus | None = None


class ListingResponse(BaseModel):
    id: str
    status: str
    tag: str | None = None
    title: str | None = None
    slug: str | None = None
    address: str | None = None
    location: str | dict[str, Any] | None = None
    price: float | None = None
    description: str | None = None
    images: list[str] | None = None
    bedrooms: int | None = None
    bathrooms: float | None = None
    square_footage: int | None = None
    property_type: str | None = None
    year_built: int | None = None
    parking_available: bool | None = None
    listing_type: str | None = None
    available_from: datetime | None = None
    features: list[str] | None = None
    amenities: list[str] | None = None
    facilities: list[str] | None = None
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {
        "from_attributes": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class DuplicateDraftCheck(BaseModel):
    title: str
    slug: str
    address: str
    created_by: str
    listing_id: str | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class DuplicateDraftResult(BaseModel):
    exists: bool
