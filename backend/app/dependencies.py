from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.repositories.base import ListingRepository
from app.repositories.sql import SqlListingRepository


def get_listing_repository(db: Session = Depends(get_db)) -> ListingRepository:
    return SqlListingRepository(db)


def get_caller_id(request: Request) -> str | None:
    """User id attached by the upstream auth layer, if any."""
    user_id = getattr(request.state, "user_id", None)
    if user_id:
        return str(user_id)
    return request.headers.get(settings.caller_id_header) or None
