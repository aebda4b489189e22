"""Command line entry point: ``python -m fluenthttp.app.main GET https://example.com -q q=1``."""
from __future__ import annotations

import argparse
import sys
from typing import Sequence

from loguru import logger

from fluenthttp.app.composition import Http
from fluenthttp.app.config.settings import Settings
from fluenthttp.app.constants import RequestMethod
from fluenthttp.app.core.logging import configure_logging, log_event
from fluenthttp.app.domain.request import Request
from fluenthttp.app.ports.http_client import HttpClientError


def _split(raw: str, sep: str) -> tuple[str, str]:
    key, _, value = raw.partition(sep)
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fluenthttp", description="Send one HTTP request and print the response body.")
    parser.add_argument(
        "method",
        type=str.upper,
        choices=[RequestMethod.GET, RequestMethod.POST, RequestMethod.DELETE],
    )
    parser.add_argument("url")
    parser.add_argument("-q", "--query", action="append", default=[], metavar="KEY=VALUE")
    parser.add_argument("-H", "--header", action="append", default=[], metavar="KEY:VALUE")
    parser.add_argument("--data", help="raw request body (POST/DELETE)")
    parser.add_argument("--content-type", default="text/plain; charset=UTF-8")
    parser.add_argument("--user-agent")
    parser.add_argument("--no-redirect", action="store_true")
    parser.add_argument("-i", "--include", action="store_true", help="print status line and headers")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def build_request(http: Http, args: argparse.Namespace) -> Request:
    request = http.request(args.method, args.url)
    for raw in args.query:
        request = request.query(*_split(raw, "="))
    for raw in args.header:
        key, value = _split(raw, ":")
        request = request.header(key, value.strip())
    if args.data is not None:
        request = request.body(args.data, args.content_type)
    if args.user_agent:
        request = request.user_agent(args.user_agent)
    if args.no_redirect:
        request = request.no_redirect()
    if args.verbose:
        request = request.verbose()
    return request


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    with Http(settings) as http:
        try:
            response = build_request(http, args).execute_raw()
        except HttpClientError as exc:
            logger.error("request failed: {}", exc)
            return 1

    log_event("response_received", status_code=response.status_code, url=response.url)
    if args.include:
        print(str(response))
        print()
    print(response.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
