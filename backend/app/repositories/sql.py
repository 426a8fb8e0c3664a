from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, or_, select

from app.models.listing import Listing
from app.repositories.base import ListingQuery, ListingRepository

if TYPE_CHECKING:
    from sqlalchemy.orm import Session
    from sqlalchemy.sql.elements import ColumnElement


def _conditions(query: ListingQuery) -> list[ColumnElement[bool]]:
    conds: list[ColumnElement[bool]] = [
        getattr(Listing, k) == v for k, v in query.equals.items()
    ]
    if query.any_of:
        conds.append(
            or_(
                *(
                    and_(*(getattr(Listing, k) == v for k, v in cond.items()))
                    for cond in query.any_of
                )
            )
        )
    if query.exclude_id is not None:
        conds.append(Listing.id != query.exclude_id)
    return conds


class SqlListingRepository(ListingRepository):
    def __init__(self, db: Session) -> None:
        self.db = db

    def find(self, query: ListingQuery | None = None) -> list[Listing]:
        stmt = select(Listing).order_by(Listing.created_at.asc(), Listing.id.asc())
        if query is not None:
            stmt = stmt.where(*_conditions(query))
        return list(self.db.scalars(stmt).all())

    def find_by_id(self, listing_id: str) -> Listing | None:
        return self.db.get(Listing, listing_id)

    def create(self, fields: dict[str, Any]) -> Listing:
        listing = Listing(**fields)
        self.db.add(listing)
        self.db.commit()
        self.db.refresh(listing)
        return listing

    def find_by_id_and_update(self, listing_id: str, changes: dict[str, Any]) -> Listing | None:
        listing = self.db.get(Listing, listing_id)
        if listing is None:
            return None
        for k, v in changes.items():
            setattr(listing, k, v)
        self.db.commit()
        self.db.refresh(listing)
        return listing

    def find_by_id_and_delete(self, listing_id: str) -> Listing | None:
        listing = self.db.get(Listing, listing_id)
        if listing is None:
            return None
        self.db.delete(listing)
        self.db.commit()
        return listing

    def exists(self, query: ListingQuery) -> bool:
        stmt = select(Listing.id).where(*_conditions(query)).limit(1)
        return self.db.scalars(stmt).first() is not None
