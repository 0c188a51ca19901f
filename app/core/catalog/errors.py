"""
Catalog error taxonomy.

Every upstream and transport failure is raised as a CatalogError subclass
carrying the status and payload surfaced to the client.
"""

from typing import Optional

DEFAULT_RETRY_AFTER = 60


class CatalogError(Exception):
    """Base error with the status and payload surfaced to the client."""

    status_code = 500

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        retry_after: Optional[int] = None,
    ):
        self.message = message
        self.details = details
        self.retry_after = retry_after
        super().__init__(message)

    def to_payload(self) -> dict:
        content = {"error": self.message}
        if self.details:
            content["details"] = self.details
        if self.retry_after is not None:
            content["retryAfter"] = self.retry_after
        return content


class ConfigurationError(CatalogError):
    """API credential missing from process configuration."""

    status_code = 500


class UpstreamRateLimited(CatalogError):
    status_code = 429

    def __init__(self, retry_after: Optional[int] = None):
        super().__init__(
            "Rate limit exceeded. Please wait a moment and try again.",
            retry_after=DEFAULT_RETRY_AFTER if retry_after is None else retry_after,
        )


class UpstreamForbidden(CatalogError):
    status_code = 403

    def __init__(self):
        super().__init__(
            "API access forbidden. You may need to subscribe to this API on "
            "RapidAPI or check your API key."
        )


class UpstreamUnauthorized(CatalogError):
    status_code = 401

    def __init__(self):
        super().__init__("Unauthorized. Please check your API key.")


class UpstreamGenericError(CatalogError):
    """Any other non-2xx upstream response, or an unreadable body."""

    status_code = 500

    def __init__(self, upstream_status: Optional[int], body: str = ""):
        self.upstream_status = upstream_status
        super().__init__(
            "Failed to fetch movies",
            details=f"HTTP error! status: {upstream_status}, message: {body}",
        )


class NetworkError(CatalogError):
    """Transport-level failure: DNS, refused connection, timeout."""

    status_code = 500

    def __init__(self, reason: str):
        super().__init__("Failed to fetch movies", details=reason)
