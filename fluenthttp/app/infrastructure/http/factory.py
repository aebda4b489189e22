"""HTTP client factory: builds AbstractHttpClient and the executor from settings."""
from __future__ import annotations

from http.cookiejar import CookieJar

from fluenthttp.app.config.settings import Settings
from fluenthttp.app.domain.executor import RequestExecutor
from fluenthttp.app.infrastructure.http.httpx_client import HttpxHttpClient, TransportFactory
from fluenthttp.app.ports.http_client import AbstractHttpClient


def create_http_client(
    settings: Settings,
    *,
    cookie_jar: CookieJar | None = None,
    transport_factory: TransportFactory | None = None,
) -> AbstractHttpClient:
    """Build an HTTP client. Cookies are kept in ``cookie_jar`` (a new accept-all jar by default)."""
    return HttpxHttpClient(cookie_jar=cookie_jar, transport_factory=transport_factory)


def create_request_executor(settings: Settings, client: AbstractHttpClient) -> RequestExecutor:
    return RequestExecutor(client, max_redirections=settings.max_redirections)
