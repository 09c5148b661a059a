"""
Custom exceptions for the application.

Everything raised by the clock and conversion services derives from
``BaseAPIException`` so the API layer can render it with the status code
and error code it carries.
"""

from typing import Any, Dict, Optional


class BaseAPIException(Exception):
    """Base exception class for API errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(BaseAPIException):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class SyncUnavailable(BaseAPIException):
    """The reference-time exchange failed (network, status or body)."""

    def __init__(
        self,
        message: str = "Reference clock unavailable",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            status_code=503,
            error_code="SYNC_UNAVAILABLE",
            details=details,
        )


class InvalidZoneId(BaseAPIException):
    """An unrecognized IANA zone identifier was supplied."""

    def __init__(
        self,
        zone_id: Any,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.zone_id = zone_id
        super().__init__(
            message=f"Invalid timezone identifier: {zone_id!r}",
            status_code=400,
            error_code="INVALID_ZONE_ID",
            details=details or {"zone_id": zone_id},
        )


class UnparseableInput(BaseAPIException):
    """User-supplied date, time or timestamp input could not be used."""

    def __init__(
        self,
        message: str = "Invalid input",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            status_code=422,
            error_code="UNPARSEABLE_INPUT",
            details=details,
        )


class CatalogIntegrityError(BaseAPIException):
    """The city catalog holds data the core cannot work with."""

    def __init__(
        self,
        message: str = "City catalog integrity violation",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            status_code=500,
            error_code="CATALOG_INTEGRITY_ERROR",
            details=details,
        )
