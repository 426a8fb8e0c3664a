"""Listing CRUD, moderation and duplicate-draft checks.

Each operation validates its input, issues a single repository call and
raises an ``app.utils.exceptions`` error on failure.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from pydantic.alias_generators import to_snake
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.models.listing import ListingStatus
from app.repositories.base import ListingQuery
from app.schemas.listing import (
    DRAFT_OPTIONAL_FIELDS,
    DuplicateDraftCheck,
    ListingRecord,
    ListingUpdate,
    is_blank,
)
from app.utils.exceptions import (
    InvalidIdError,
    ListingNotFoundError,
    ListingValidationError,
    MissingParamError,
    StoreError,
)
from app.utils.urls import normalize_image_urls

if TYPE_CHECKING:
    from app.models.listing import Listing
    from app.repositories.base import ListingRepository

logger = logging.getLogger(__name__)

INVALID_LISTING_ID = "Invalid listing ID format"


def _error_detail(error: Exception) -> Any:
    if not settings.expose_error_details:
        return None
    if isinstance(error, ValidationError):
        return error.errors(include_url=False, include_context=False)
    return {"type": type(error).__name__, "detail": str(error)}


@contextmanager
def _store_call(message: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception(message)
        raise StoreError(message, error=_error_detail(e)) from e


def _check_id(repo: ListingRepository, value: Any, message: str = INVALID_LISTING_ID) -> str:
    if not repo.is_valid_id(value):
        raise InvalidIdError(message)
    return value.lower()


def _normalize_images(data: dict[str, Any]) -> None:
    if isinstance(data.get("images"), list):
        data["images"] = normalize_image_urls(data["images"])


def _strip_empty_draft_fields(data: dict[str, Any]) -> None:
    for field in DRAFT_OPTIONAL_FIELDS:
        for key in {field, to_snake(field)}:
            if key in data and is_blank(data[key]):
                del data[key]


def list_listings(
    repo: ListingRepository, tag: str | None = None, status: str | None = None
) -> list[Listing]:
    equals: dict[str, Any] = {}
    if tag:
        equals["tag"] = tag
    if status:
        equals["status"] = status
    with _store_call("Error fetching listings"):
        return repo.find(ListingQuery(equals=equals))


def get_listing(repo: ListingRepository, listing_id: str) -> Listing:
    listing_id = _check_id(repo, listing_id)
    with _store_call("Error fetching listing"):
        listing = repo.find_by_id(listing_id)
    if listing is None:
        raise ListingNotFoundError()
    return listing


def create_listing(
    repo: ListingRepository, body: dict[str, Any], caller_id: str | None = None
) -> Listing:
    """Insert a listing on behalf of ``caller_id``.

    Status defaults to draft. Drafts drop empty content fields and only get
    type checks; other statuses must pass full validation or nothing is saved.
    """
    data = dict(body)
    if is_blank(data.get("status")):
        data["status"] = ListingStatus.DRAFT.value
    if caller_id:
        data.pop("created_by", None)
        data["createdBy"] = caller_id
    _normalize_images(data)

    is_draft = data["status"] == ListingStatus.DRAFT.value
    if is_draft:
        _strip_empty_draft_fields(data)
    logger.debug("Final listing data before save: %s", data)

    try:
        record = ListingRecord.model_validate(data)
    except ValidationError as e:
        message = "Error creating listing" if is_draft else "Validation failed"
        logger.info("Rejected listing create (%s): %d error(s)", message, e.error_count())
        raise ListingValidationError(message, error=_error_detail(e)) from e

    fields = record.model_dump(exclude_unset=True)
    fields["status"] = record.status.value
    with _store_call("Error creating listing"):
        listing = repo.create(fields)
    logger.info("Created listing id=%s status=%s", listing.id, listing.status)
    return listing


def update_listing(repo: ListingRepository, listing_id: str, body: dict[str, Any]) -> Listing:
    data = dict(body)
    _normalize_images(data)
    listing_id = _check_id(repo, listing_id)

    try:
        changes = ListingUpdate.model_validate(data).model_dump(exclude_unset=True)
    except ValidationError as e:
        raise ListingValidationError("Error updating listing", error=_error_detail(e)) from e
    if changes.get("status") is None:
        changes.pop("status", None)
    else:
        changes["status"] = changes["status"].value

    logger.debug("Updating listing id=%s with %s", listing_id, changes)
    with _store_call("Error updating listing"):
        listing = repo.find_by_id_and_update(listing_id, changes)
    if listing is None:
        raise ListingNotFoundError()
    logger.info("Updated listing id=%s fields=%s", listing_id, sorted(changes))
    return listing


def delete_listing(repo: ListingRepository, listing_id: str) -> None:
    listing_id = _check_id(repo, listing_id)
    with _store_call("Error deleting listing"):
        listing = repo.find_by_id_and_delete(listing_id)
    if listing is None:
        raise ListingNotFoundError()
    logger.info("Deleted listing id=%s", listing_id)


def list_listings_for_user(
    repo: ListingRepository, user_id: str | None, status: str | None = None
) -> list[Listing]:
    if not user_id:
        raise MissingParamError("Missing userId query parameter")
    user_id = _check_id(repo, user_id, "Invalid userId format")

    equals: dict[str, Any] = {"created_by": user_id}
    if status:
        equals["status"] = status
    with _store_call("Error fetching listings by status"):
        return repo.find(ListingQuery(equals=equals))


def _set_status(
    repo: ListingRepository, listing_id: str, status: ListingStatus, error_message: str
) -> Listing:
    listing_id = _check_id(repo, listing_id)
    with _store_call(error_message):
        listing = repo.find_by_id_and_update(listing_id, {"status": status.value})
    if listing is None:
        raise ListingNotFoundError()
    logger.info("Listing id=%s marked %s", listing_id, status.value)
    return listing


def approve_listing(repo: ListingRepository, listing_id: str) -> Listing:
    return _set_status(repo, listing_id, ListingStatus.APPROVED, "Error approving listing")


def reject_listing(repo: ListingRepository, listing_id: str) -> Listing:
    return _set_status(repo, listing_id, ListingStatus.REJECTED, "Error rejecting listing")


def check_duplicate_draft(repo: ListingRepository, body: dict[str, Any]) -> bool:
    """Whether the owner already has another draft with the same title, slug or address."""
    try:
        check = DuplicateDraftCheck.model_validate(body)
    except ValidationError as e:
        raise MissingParamError(
            "title, slug, address and createdBy are required", error=_error_detail(e)
        ) from e

    query = ListingQuery(
        equals={"status": ListingStatus.DRAFT.value, "created_by": check.created_by.lower()},
        any_of=[
            {"title": check.title.strip()},
            {"slug": check.slug.strip()},
            {"address": check.address.strip()},
        ],
        exclude_id=check.listing_id.lower() if check.listing_id else None,
    )
    with _store_call("Error checking duplicate draft"):
        return repo.exists(query)
