"""HTTP client port: contract for sending one hop of a request.

The executor depends on this port; infrastructure (e.g. httpx) implements it.
Keeps domain free of infrastructure imports.
"""
from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from fluenthttp.app.domain.models import Response


class HttpClientError(RuntimeError):
    """Base for every failure surfaced by a request (arguments, redirects, network)."""


class InvalidArgumentError(HttpClientError, ValueError):
    """Raised for a blank URL or a missing response mapper."""


class TooManyRedirectsError(HttpClientError):
    """Raised when a redirect chain is longer than the configured maximum."""


class HttpClientTimeoutError(HttpClientError):
    """Raised when the request times out."""


@runtime_checkable
class AbstractHttpClient(Protocol):
    """Port: send a single request over a fresh connection. Implementations live in infrastructure."""

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
    ) -> Response:
        """Open a connection, write the request, capture the Response and close the connection.

        Never follows redirects. Raise HttpClientTimeoutError or HttpClientError on failure.
        """
        ...

    def close(self) -> None:
        """Release resources. No-op allowed if nothing to close."""
        ...
