"""Response mapper port: turn a captured Response into a value of type T."""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from fluenthttp.app.domain.models import Response
from fluenthttp.app.ports.http_client import HttpClientError

T_co = TypeVar("T_co", covariant=True)


class ResponseMappingError(HttpClientError):
    """Raised when a response body cannot be decoded into the target type."""


@runtime_checkable
class ResponseMapper(Protocol[T_co]):
    def map(self, response: Response | None) -> T_co: ...
