"""Transport errors raised while fetching UserCSS source."""
from __future__ import annotations


class FetchError(Exception):
    """Fetching the source text failed; nothing was parsed."""

    def __init__(
        self,
        message: str,
        *,
        url: str = "",
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class FetchTimeoutError(FetchError):
    """The request timed out."""
