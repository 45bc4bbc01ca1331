from typing import Optional


class CatalogError(Exception):
    """Base class for every failure the admin pipelines log and swallow."""


class ValidationError(CatalogError):
    """A field value was rejected before anything was sent."""


class NetworkError(CatalogError):
    """The request never got a response (connection refused, DNS, timeout)."""


class ServerError(CatalogError):
    """The store answered, but not with a success status or usable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
