from __future__ import annotations


class MarketplaceError(Exception):
    """Base for errors that map onto a transport status code."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(MarketplaceError):
    status_code = 404


class ValidationFailure(MarketplaceError):
    status_code = 400


class StoreFailure(MarketplaceError):
    status_code = 500
