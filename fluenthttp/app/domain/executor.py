"""Request executor: sends a Request through the HTTP client port and follows redirects by hand.

Uses the HTTP port (AbstractHttpClient); the client is built in the composition root.
Each hop goes over its own connection. Redirect hops are always GET and carry only
the explicitly set User-Agent, the way a browser re-issues a navigation.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import urljoin

from loguru import logger

from fluenthttp.app.constants import (
    CONTENT_LENGTH_HEADER,
    CONTENT_TYPE_HEADER,
    FORM_CONTENT_TYPE,
    MAX_REDIRECTIONS,
    USER_AGENT_HEADER,
    RequestMethod,
)
from fluenthttp.app.core import SERVICE_NAME
from fluenthttp.app.core.logging import enable_verbose_output, log_verbose
from fluenthttp.app.domain.models import Pair, Response
from fluenthttp.app.domain.query import append_query, assemble_headers, prepare_query_string
from fluenthttp.app.ports.http_client import (
    AbstractHttpClient,
    HttpClientError,
    InvalidArgumentError,
    TooManyRedirectsError,
)

if TYPE_CHECKING:
    from fluenthttp.app.domain.request import Request

BODY_METHODS = (RequestMethod.POST, RequestMethod.DELETE)


class RequestExecutor:
    """Executes requests with an injectable AbstractHttpClient.

    max_redirections is the number of redirects followed. With the default of 5 a
    chain of five redirects ending in 200 succeeds; a sixth redirect raises
    TooManyRedirectsError and no Response is returned. This is one more than a
    pre-incremented "++count <= max" guard would allow; keep the count as is.
    """

    def __init__(self, client: AbstractHttpClient, *, max_redirections: int = MAX_REDIRECTIONS) -> None:
        if max_redirections < 0:
            raise ValueError("max_redirections must be >= 0")
        self._client = client
        self._max_redirections = max_redirections

    @property
    def max_redirections(self) -> int:
        return self._max_redirections

    def execute(self, request: Request) -> Response:
        if request.url is None or not str(request.url).strip():
            raise InvalidArgumentError("Invalid URL")

        verbose = request.verbose_logging
        if verbose:
            enable_verbose_output()
        url, headers, content = self._prepare(request)

        try:
            _log(verbose, "request", f"HTTP {request.method} {url}", method=request.method, url=url)
            for name, value in headers.items():
                _log(verbose, "request_header", f"{name}: {value}")
            if content is not None:
                _log(verbose, "request_body", content.decode("utf-8", errors="replace"))

            response = self._client.send(request.method, url, headers=headers, content=content)

            for redirect_count in range(1, self._max_redirections + 2):
                if not (request.follow_redirects and response.is_redirect and response.location):
                    break
                if redirect_count > self._max_redirections:
                    raise TooManyRedirectsError(
                        f"Too many redirections: more than {self._max_redirections} starting at {request.url}"
                    )

                location = urljoin(url, response.location)
                _log(verbose, "response", str(response), status_code=response.status_code)
                _log(verbose, "redirect", f"Redirect #{redirect_count} ({location})", count=redirect_count)

                hop_headers: dict[str, str] = {}
                if request.explicit_user_agent:
                    hop_headers[USER_AGENT_HEADER] = request.explicit_user_agent
                url = location
                _log(verbose, "request", f"HTTP {RequestMethod.GET} {url}", method=RequestMethod.GET, url=url)
                response = self._client.send(RequestMethod.GET, url, headers=hop_headers)
        except HttpClientError:
            raise
        except OSError as exc:
            logger.bind(service_name=SERVICE_NAME, event="request_failed", url=url).warning(str(exc))
            raise HttpClientError(f"request failed for {url}: {exc}") from exc

        _log(verbose, "response", str(response), status_code=response.status_code)
        return response

    def _prepare(self, request: Request) -> tuple[str, dict[str, str], bytes | None]:
        """Resolve the target URL, the header map and the body bytes for the first hop."""
        url = str(request.url).strip()
        extra: list[Pair | None] = []
        content: bytes | None = None

        if request.method == RequestMethod.GET:
            url = append_query(url, request.query_params)
        elif request.method in BODY_METHODS:
            content_type: str | None
            if request.payload is not None:
                content = request.payload.content
                content_type = request.payload.content_type
            else:
                query_string = prepare_query_string(request.query_params)
                content = query_string.encode("utf-8") if query_string.strip() else None
                content_type = FORM_CONTENT_TYPE
            if content is not None:
                extra.append(Pair.of(CONTENT_TYPE_HEADER, content_type) if content_type else None)
                extra.append(Pair.of(CONTENT_LENGTH_HEADER, len(content)))
        else:
            raise InvalidArgumentError(f"unsupported method: {request.method}")

        return url, assemble_headers(request.headers + tuple(extra)), content


def _log(enabled: bool, event: str, message: str, **kwargs: Any) -> None:
    if enabled:
        log_verbose(event, message, **kwargs)
