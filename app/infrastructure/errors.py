"""Domain error taxonomy.

Callers of the content services only ever see the closed set of failures
defined here. Each carries a machine-readable ``code``, a human ``message``
and optional ``details`` naming the offending input. Storage and cache
implementation details never appear in these errors.

Example:
    try:
        service.create_translation(...)
    except ConflictError as e:
        logger.info("duplicate_translation", code=e.code)
"""

from typing import Any, Dict, Optional


class ServiceError(Exception):
    """Base exception for all domain-level failures.

    Attributes:
        code: Machine-readable error code (e.g. "VALIDATION_ERROR").
        message: Human-friendly message safe to return to API clients.
        details: Optional structured context (offending fields, limits, ...).
    """

    default_code = "SERVICE_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for an API response body."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(ServiceError):
    """Raised when input is malformed, missing, oversized or unsupported.

    Always detected before any store access.

    Example:
        >>> service.create_translation(1, "xx-xx", ...)
        Traceback (most recent call last):
        ...
        ValidationError: Unsupported language: xx-xx
    """

    default_code = "VALIDATION_ERROR"


class ConflictError(ServiceError):
    """Raised when a write would violate a uniqueness or in-use rule."""

    default_code = "CONFLICT"


class NotFoundError(ServiceError):
    """Raised when the addressed resource does not exist."""

    default_code = "NOT_FOUND"


class MultilingualUnavailableError(ServiceError):
    """Raised when localized reads are requested but the cache capability is off."""

    default_code = "MULTILINGUAL_UNAVAILABLE"
