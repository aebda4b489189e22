"""Concrete HTTP client implementation using httpx (injected where AbstractHttpClient is needed)."""
from __future__ import annotations

import io
from http.cookiejar import CookieJar
from typing import Callable, Mapping

import httpx
from loguru import logger

from fluenthttp.app.constants import READ_CHUNK_SIZE
from fluenthttp.app.core import SERVICE_NAME
from fluenthttp.app.core.streams import copy
from fluenthttp.app.domain.models import Response, headers_from_items
from fluenthttp.app.ports.http_client import (
    AbstractHttpClient,
    HttpClientError,
    HttpClientTimeoutError,
)

TransportFactory = Callable[[], httpx.BaseTransport]


def capture_response(response: httpx.Response) -> Response:
    """Read the whole body of ``response`` into a Response and close it, even if reading fails."""
    buffer = io.BytesIO()
    try:
        copy(response.iter_bytes(READ_CHUNK_SIZE), buffer)
    finally:
        response.close()
    return Response(
        status_code=response.status_code,
        status_message=response.reason_phrase,
        headers=headers_from_items(response.headers.multi_items()),
        body=buffer.getvalue(),
        url=str(response.url),
    )


class HttpxHttpClient(AbstractHttpClient):
    """AbstractHttpClient implementation using one short-lived httpx.Client per hop.

    All hops share ``cookie_jar``, so cookies set by one response are sent on the next
    request to the same site. ``transport_factory`` builds the transport for each hop
    (tests pass ``httpx.MockTransport``); by default httpx opens a fresh connection.
    """

    def __init__(
        self,
        *,
        cookie_jar: CookieJar | None = None,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        self._cookie_jar = cookie_jar if cookie_jar is not None else CookieJar()
        self._transport_factory = transport_factory

    @property
    def cookie_jar(self) -> CookieJar:
        return self._cookie_jar

    def _open(self) -> httpx.Client:
        transport = self._transport_factory() if self._transport_factory is not None else None
        return httpx.Client(
            cookies=self._cookie_jar,
            follow_redirects=False,
            transport=transport,
            limits=httpx.Limits(max_keepalive_connections=0),
        )

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
    ) -> Response:
        try:
            with self._open() as client:
                request = client.build_request(method, url, headers=dict(headers or {}), content=content)
                return capture_response(client.send(request, stream=True))
        except httpx.TimeoutException as exc:
            _log_failure(method, url, exc)
            raise HttpClientTimeoutError(f"timeout while requesting {url}") from exc
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            _log_failure(method, url, exc)
            raise HttpClientError(f"http {method} failed for {url}: {exc}") from exc
        except UnicodeEncodeError as exc:
            # Header names and values must be ASCII on the wire.
            _log_failure(method, url, exc)
            raise HttpClientError(f"cannot encode {method} request for {url}: {exc}") from exc

    def close(self) -> None:
        # Connections never outlive a hop.
        return None


def _log_failure(method: str, url: str, exc: Exception) -> None:
    logger.bind(service_name=SERVICE_NAME, event="hop_failed", method=method, url=url).warning(str(exc))
