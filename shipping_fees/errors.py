"""
Exception hierarchy for fee computation and the user repository.

Every exception carries a stable ``code`` and the offending input in
``details`` so callers can branch on kind without parsing messages.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ShippingFeeError(Exception):
    """Base exception for all fee computation and configuration errors."""

    code = "SHIPPING_FEE_ERROR"

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        self.details = details or {}
        super().__init__(message)


class InvalidWeight(ShippingFeeError):
    """Weight outside (0, 50] kg."""

    code = "INVALID_WEIGHT"

    def __init__(self, weight: float) -> None:
        self.weight = weight
        super().__init__(
            f"invalid weight: must be between 0 and 50 kg, got {weight}",
            details={"weight": weight},
        )


class UnknownZone(ShippingFeeError):
    code = "UNKNOWN_ZONE"

    def __init__(self, zone: str) -> None:
        self.zone = zone
        super().__init__(f"invalid zone: {zone}", details={"zone": zone})


class ZoneNotImplemented(ShippingFeeError):
    """Zone recognised but not priced by the legacy fee function."""

    code = "NOT_IMPLEMENTED"

    def __init__(self, zone: str) -> None:
        self.zone = zone
        super().__init__(f"{zone.lower()} shipping not implemented", details={"zone": zone})


class RateUnavailable(ShippingFeeError):
    code = "RATE_UNAVAILABLE"

    def __init__(self, zone: str) -> None:
        self.zone = zone
        super().__init__(f"shipping rate not available for zone: {zone}", details={"zone": zone})


class UnknownDiscountCode(ShippingFeeError):
    code = "UNKNOWN_DISCOUNT_CODE"

    def __init__(self, discount_code: str) -> None:
        self.discount_code = discount_code
        super().__init__(
            f"invalid discount code: {discount_code}",
            details={"discount_code": discount_code},
        )


class InvalidDiscountPercentage(ShippingFeeError):
    code = "INVALID_DISCOUNT_PERCENTAGE"

    def __init__(self, percentage: float) -> None:
        self.percentage = percentage
        super().__init__(
            f"discount percentage must be between 0 and 1, got {percentage}",
            details={"percentage": percentage},
        )


class RepositoryError(Exception):
    """Base exception for user repository failures."""

    code = "REPOSITORY_ERROR"

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        self.details = details or {}
        super().__init__(message)


class UserNotFound(RepositoryError):
    code = "USER_NOT_FOUND"

    def __init__(self, **lookup: Any) -> None:
        key = ", ".join(f"{k}={v!r}" for k, v in lookup.items())
        super().__init__(f"user not found: {key}", details=dict(lookup))


class DuplicateEmail(RepositoryError):
    code = "DUPLICATE_EMAIL"

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"email already registered: {email}", details={"email": email})
