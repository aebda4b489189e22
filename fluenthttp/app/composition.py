"""Composition root: build the client configuration and hand out bound requests.

An ``Http`` owns one cookie jar, one HTTP client and one executor. Requests it creates
are bound to that executor, so cookies persist across every request of the same ``Http``
and nowhere else.
"""
from __future__ import annotations

from http.cookiejar import CookieJar

from loguru import logger

from fluenthttp.app.config.settings import Settings
from fluenthttp.app.constants import RequestMethod
from fluenthttp.app.domain.executor import RequestExecutor
from fluenthttp.app.domain.request import Request
from fluenthttp.app.infrastructure.http.factory import create_http_client, create_request_executor
from fluenthttp.app.infrastructure.http.httpx_client import TransportFactory
from fluenthttp.app.ports.http_client import AbstractHttpClient


class Http:
    """Factory for GET/POST/DELETE requests sharing one client configuration."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client: AbstractHttpClient | None = None,
        cookie_jar: CookieJar | None = None,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._client = client or create_http_client(
            self._settings,
            cookie_jar=cookie_jar,
            transport_factory=transport_factory,
        )
        self._executor = create_request_executor(self._settings, self._client)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def client(self) -> AbstractHttpClient:
        return self._client

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    def request(self, method: str, url: str | None) -> Request:
        request = Request.new(url, method).bind(self._executor)
        if self._settings.user_agent:
            request = request.user_agent(self._settings.user_agent)
        if self._settings.verbose:
            request = request.verbose()
        return request

    def get(self, url: str | None) -> Request:
        return self.request(RequestMethod.GET, url)

    def post(self, url: str | None) -> Request:
        return self.request(RequestMethod.POST, url)

    def delete(self, url: str | None) -> Request:
        return self.request(RequestMethod.DELETE, url)

    def close(self) -> None:
        try:
            self._client.close()
        except Exception as exc:
            logger.warning("http client close failed: {}", exc)

    def __enter__(self) -> "Http":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def get(url: str | None) -> Request:
    return Http().get(url)


def post(url: str | None) -> Request:
    return Http().post(url)


def delete(url: str | None) -> Request:
    return Http().delete(url)
