from typing import Optional


class StorefrontError(Exception):
    """Base class for storefront errors; ``str(exc)`` is safe to show to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ApiError(StorefrontError):
    """The REST API answered with a non-success status or could not be reached.

    ``status_code`` is None for transport failures.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class KlarnaResponseError(StorefrontError):
    """Klarna returned an unusable session (malformed, or no snippet and no redirect URL)."""


class CheckoutError(StorefrontError):
    """Checkout could not proceed (empty cart, bad payment method, ...)."""
