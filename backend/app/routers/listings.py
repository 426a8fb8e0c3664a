from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query

from app.dependencies import get_caller_id, get_listing_repository
from app.repositories.base import ListingRepository
from app.schemas.listing import DuplicateDraftResult, ListingResponse
from app.services import listing_service

router = APIRouter(prefix="/listings")


@router.get("", response_model=list[ListingResponse], response_model_exclude_none=True)
def list_listings(
    tag: str | None = None,
    status: str | None = None,
    repo: ListingRepository = Depends(get_listing_repository),
) -> list[ListingResponse]:
    listings = listing_service.list_listings(repo, tag=tag, status=status)
    return [ListingResponse.model_validate(listing) for listing in listings]


@router.post(
    "",
    response_model=ListingResponse,
    response_model_exclude_none=True,
    status_code=201,
)
def create_listing(
    body: dict[str, Any] = Body(...),
    caller_id: str | None = Depends(get_caller_id),
    repo: ListingRepository = Depends(get_listing_repository),
) -> ListingResponse:
    listing = listing_service.create_listing(repo, body, caller_id)
    return ListingResponse.model_validate(listing)


@router.get(
    "/status", response_model=list[ListingResponse], response_model_exclude_none=True
)
@router.get(
    "/status/{status}",
    response_model=list[ListingResponse],
    response_model_exclude_none=True,
)
def list_listings_by_status(
    status: str | None = None,
    user_id: str | None = Query(default=None, alias="userId"),
    repo: ListingRepository = Depends(get_listing_repository),
) -> list[ListingResponse]:
    listings = listing_service.list_listings_for_user(repo, user_id, status)
    return [ListingResponse.model_validate(listing) for listing in listings]


@router.post("/check-duplicate", response_model=DuplicateDraftResult)
def check_duplicate_draft(
    body: dict[str, Any] = Body(...),
    repo: ListingRepository = Depends(get_listing_repository),
) -> DuplicateDraftResult:
    return DuplicateDraftResult(exists=listing_service.check_duplicate_draft(repo, body))


@router.get(
    "/{listing_id}", response_model=ListingResponse, response_model_exclude_none=True
)
def get_listing(
    listing_id: str, repo: ListingRepository = Depends(get_listing_repository)
) -> ListingResponse:
    return ListingResponse.model_validate(listing_service.get_listing(repo, listing_id))


@router.patch(
    "/{listing_id}", response_model=ListingResponse, response_model_exclude_none=True
)
def update_listing(
    listing_id: str,
    body: dict[str, Any] = Body(...),
    repo: ListingRepository = Depends(get_listing_repository),
) -> ListingResponse:
    listing = listing_service.update_listing(repo, listing_id, body)
    return ListingResponse.model_validate(listing)


@router.delete("/{listing_id}")
def delete_listing(
    listing_id: str, repo: ListingRepository = Depends(get_listing_repository)
) -> dict:
    listing_service.delete_listing(repo, listing_id)
    return {"message": "Listing deleted successfully"}


@router.patch(
    "/{listing_id}/approve",
    response_model=ListingResponse,
    response_model_exclude_none=True,
)
def approve_listing(
    listing_id: str, repo: ListingRepository = Depends(get_listing_repository)
) -> ListingResponse:
    return ListingResponse.model_validate(listing_service.approve_listing(repo, listing_id))


@router.patch(
    "/{listing_id}/reject",
    response_model=ListingResponse,
    response_model_exclude_none=True,
)
def reject_listing(
    listing_id: str, repo: ListingRepository = Depends(get_listing_repository)
) -> ListingResponse:
    return ListingResponse.model_validate(listing_service.reject_listing(repo, listing_id))
