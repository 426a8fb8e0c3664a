"""Error taxonomy for the listings service.

Every error carries the HTTP status it maps to and an optional raw error
payload; ``app.main`` turns them into ``{"message", "error"}`` responses.
"""

from __future__ import annotations

from typing import Any


class ListingServiceError(Exception):
    status_code: int = 500

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error


class InvalidIdError(ListingServiceError):
    status_code = 400


class MissingParamError(ListingServiceError):
    status_code = 400


class ListingValidationError(ListingServiceError):
    status_code = 400


class ListingNotFoundError(ListingServiceError):
    status_code = 404

    def __init__(self, message: str = "Listing not found", error: Any = None) -> None:
        super().__init__(message, error)


class StoreError(ListingServiceError):
    status_code = 500
