"""JSON response mapper backed by pydantic's TypeAdapter."""
from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from fluenthttp.app.domain.models import Response
from fluenthttp.app.ports.response_mapper import ResponseMapper, ResponseMappingError

T = TypeVar("T")


class JsonMapper(ResponseMapper[T]):
    """Decodes a UTF-8 JSON body into ``target``.

    ``target`` is anything pydantic can validate: BaseModel subclasses, dataclasses,
    TypedDicts, ``dict[str, int]`` and so on. A missing response, or a missing or
    blank body, maps to None.
    """

    def __init__(self, target: type[T] | Any) -> None:
        self._target = target
        self._adapter: TypeAdapter[T] = TypeAdapter(target)

    @classmethod
    def for_type(cls, target: type[T] | Any) -> "JsonMapper[T]":
        return cls(target)

    @property
    def target(self) -> Any:
        return self._target

    def map(self, response: Response | None) -> T | None:  # type: ignore[override]
        if response is None or response.body is None:
            return None
        try:
            json_text = response.body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ResponseMappingError(f"response body is not valid UTF-8: {exc}") from exc
        if not json_text.strip():
            return None
        try:
            return self._adapter.validate_json(json_text)
        except ValidationError as exc:
            raise ResponseMappingError(f"cannot map response body to {self._target!r}: {exc}") from exc
