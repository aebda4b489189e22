from __future__ import annotations

import sys

import httpx
import pytest
from loguru import logger

from fluenthttp.app import main as cli
from fluenthttp.app.composition import Http
from tests.fakes import mock_transport_factory


def _restore_default_logging() -> None:
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message))


@pytest.fixture()
def captured_requests(monkeypatch):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path == "/missing":
            return httpx.Response(404, content=b"not here")
        return httpx.Response(200, content=b"hello", headers={"X-Served-By": "mock"})

    monkeypatch.setattr(
        cli,
        "Http",
        lambda settings: Http(settings, transport_factory=mock_transport_factory(handler)),
    )
    yield seen
    _restore_default_logging()


def test_get_prints_body(captured_requests, capsys):
    assert cli.main(["get", "https://example.com/hello", "-q", "a=1", "-H", "X-Id: 7"]) == 0

    out = capsys.readouterr().out
    assert out.strip().endswith("hello")
    assert str(captured_requests[0].url) == "https://example.com/hello?a=1"
    assert captured_requests[0].headers["X-Id"] == "7"


def test_include_prints_status_and_headers(captured_requests, capsys):
    assert cli.main(["GET", "https://example.com/missing", "--include"]) == 0
    out = capsys.readouterr().out
    assert "404 Not Found" in out
    assert "not here" in out


def test_post_with_data(captured_requests):
    cli.main(["POST", "https://example.com/", "--data", "raw", "--content-type", "text/plain"])
    assert captured_requests[0].method == "POST"
    assert captured_requests[0].content == b"raw"
    assert captured_requests[0].headers["Content-Type"] == "text/plain"


def test_failure_returns_exit_code_one(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    monkeypatch.setattr(
        cli,
        "Http",
        lambda settings: Http(settings, transport_factory=mock_transport_factory(handler)),
    )
    try:
        assert cli.main(["GET", "https://example.com/"]) == 1
    finally:
        _restore_default_logging()


def test_build_request_applies_flags(settings):
    http = Http(settings, transport_factory=mock_transport_factory(lambda request: httpx.Response(200)))
    args = cli.build_parser().parse_args(
        ["delete", "https://example.com/x", "--no-redirect", "-v", "--user-agent", "ua/1", "-q", "k=v"]
    )
    request = cli.build_request(http, args)
    assert request.method == "DELETE"
    assert request.follow_redirects is False
    assert request.verbose_logging is True
    assert request.explicit_user_agent == "ua/1"
    assert [(p.key, p.value) for p in request.query_params] == [("k", "v")]


def test_verbose_diagnostics_are_printed_once(captured_requests, capsys):
    assert cli.main(["GET", "https://example.com/hello", "-v"]) == 0
    out = capsys.readouterr().out
    assert out.count("HTTP GET https://example.com/hello") == 1
    assert out.strip().endswith("hello")
