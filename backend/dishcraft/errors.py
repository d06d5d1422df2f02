"""
Exception taxonomy for the enrichment backend.
Per-item data problems (bad ingredient names) are filtered, never raised.
"""
from typing import Optional


class DishCraftError(Exception):
    """Base class for fatal errors that abort an enrichment run or a request."""


class ConfigurationError(DishCraftError):
    """Required configuration is absent or invalid. Raised before any I/O."""


class UpstreamFetchError(DishCraftError):
    """The external recipe source could not be read (network, timeout, non-2xx, bad body)."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @property
    def is_quota_exceeded(self) -> bool:
        # Spoonacular answers 402 Payment Required once the daily points are spent
        return self.status_code == 402


class StoreError(DishCraftError):
    """A record store read or write failed."""


class DuplicateRecordError(StoreError):
    """Insert would violate a store's unique name key."""

    def __init__(self, names):
        self.names = list(names)
        super().__init__(f"duplicate record name(s): {', '.join(self.names[:10])}")
