from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Float, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.utils.object_id import generate_object_id


class ListingStatus(StrEnum):
    DRAFT = "draft"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Listing(Base):
    """Property listing. List and location fields are stored as JSON documents."""

    __tablename__ = "listings"

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=generate_object_id)
    status: Mapped[str] = mapped_column(
        String(20), default=ListingStatus.DRAFT.value, index=True
    )
    tag: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)

    title: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    slug: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    location: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    images: Mapped[Optional[list[str]]] = mapped_column(JSON, nullable=True)

    bedrooms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    bathrooms: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    square_footage: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    property_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    year_built: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    parking_available: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    listing_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    available_from: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    features: Mapped[Optional[list[str]]] = mapped_column(JSON, nullable=True)
    amenities: Mapped[Optional[list[str]]] = mapped_column(JSON, nullable=True)
    facilities: Mapped[Optional[list[str]]] = mapped_column(JSON, nullable=True)

    created_by: Mapped[Optional[str]] = mapped_column(String(24), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=func.now(), onupdate=func.now()
    )
