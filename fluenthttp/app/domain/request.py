"""Immutable fluent request builder.

Every configuration call returns a new ``Request``; the original is left as it was.
Terminal operations (``execute_raw``, ``execute_bytes``, ``execute_text``,
``execute_mapped``) hand the request to the bound executor.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Iterable, TypeVar

from fluenthttp.app.constants import USER_AGENT_HEADER, RequestMethod
from fluenthttp.app.domain.models import Pair, RequestBody, Response
from fluenthttp.app.domain.query import valid_pairs
from fluenthttp.app.ports.http_client import HttpClientError, InvalidArgumentError
from fluenthttp.app.ports.response_mapper import ResponseMapper

if TYPE_CHECKING:
    from fluenthttp.app.domain.executor import RequestExecutor

T = TypeVar("T")


def _coerce_pairs(params: tuple[Any, ...]) -> Iterable[Pair | None]:
    # query("key", "value") form; everything else is a sequence of Pair objects.
    if len(params) == 2 and (params[0] is None or isinstance(params[0], str)) and not isinstance(params[1], Pair):
        return (Pair.of(params[0], params[1]),)
    return tuple(p if isinstance(p, Pair) else None for p in params)


@dataclass(frozen=True)
class Request:
    url: str | None
    method: str = RequestMethod.GET
    query_params: tuple[Pair, ...] = ()
    headers: tuple[Pair, ...] = ()
    payload: RequestBody | None = None
    explicit_user_agent: str | None = None
    follow_redirects: bool = True
    verbose_logging: bool = False
    executor: RequestExecutor | None = field(default=None, repr=False, compare=False)

    @staticmethod
    def new(url: str | None, method: str, executor: RequestExecutor | None = None) -> "Request":
        return Request(url=url, method=method, executor=executor)

    def query(self, *params: Any) -> "Request":
        """Add query parameters: ``query(Pair, ...)`` or ``query(key, value)``.

        Pairs that are None or have a blank key are skipped; the rest still apply.
        """
        return replace(self, query_params=self.query_params + valid_pairs(_coerce_pairs(params)))

    def header(self, *params: Any) -> "Request":
        """Add headers: ``header(Pair, ...)`` or ``header(key, value)``. Invalid pairs are skipped."""
        return replace(self, headers=self.headers + valid_pairs(_coerce_pairs(params)))

    def user_agent(self, user_agent: str) -> "Request":
        """Set User-Agent on this request and on every redirect hop it triggers."""
        updated = self.header(Pair.of(USER_AGENT_HEADER, user_agent))
        return replace(updated, explicit_user_agent=user_agent)

    def body(self, content: str | bytes, content_type: str | None = None) -> "Request":
        return replace(self, payload=RequestBody.of(content, content_type))

    def no_redirect(self) -> "Request":
        return replace(self, follow_redirects=False)

    def verbose(self) -> "Request":
        return replace(self, verbose_logging=True)

    def bind(self, executor: RequestExecutor) -> "Request":
        return replace(self, executor=executor)

    def execute_raw(self) -> Response:
        if self.executor is None:
            raise HttpClientError("request is not bound to an executor")
        return self.executor.execute(self)

    def execute_bytes(self) -> bytes:
        body = self.execute_raw().body
        return body if body is not None else b""

    def execute_text(self) -> str:
        return self.execute_bytes().decode("utf-8", errors="replace")

    def execute_mapped(self, mapper: ResponseMapper[T] | None) -> T:
        if mapper is None:
            raise InvalidArgumentError("response mapper cannot be None")
        return mapper.map(self.execute_raw())
