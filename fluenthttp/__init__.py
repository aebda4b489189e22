"""Fluent request builder over httpx with manual redirect following."""
from fluenthttp.app.composition import Http, delete, get, post
from fluenthttp.app.domain.models import Pair, Response
from fluenthttp.app.domain.request import Request
from fluenthttp.app.infrastructure.mapping.json_mapper import JsonMapper
from fluenthttp.app.ports.http_client import (
    HttpClientError,
    HttpClientTimeoutError,
    InvalidArgumentError,
    TooManyRedirectsError,
)
from fluenthttp.app.ports.response_mapper import ResponseMapper, ResponseMappingError

__all__ = [
    "Http",
    "get",
    "post",
    "delete",
    "Pair",
    "Request",
    "Response",
    "ResponseMapper",
    "JsonMapper",
    "HttpClientError",
    "HttpClientTimeoutError",
    "InvalidArgumentError",
    "TooManyRedirectsError",
    "ResponseMappingError",
]
