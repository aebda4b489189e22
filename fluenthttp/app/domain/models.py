"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from fluenthttp.app.constants import LOCATION_HEADER


@dataclass(frozen=True)
class Pair:
    """Key/value used for both headers and query parameters.

    Build through ``Pair.of``: a blank key yields ``None`` instead of a Pair, and
    collections of pairs skip ``None`` entries.
    """

    key: str
    value: Any = None

    @staticmethod
    def of(key: str | None, value: Any = None) -> "Pair | None":
        if key is None or not str(key).strip():
            return None
        return Pair(key=str(key), value=value)

    @property
    def text_value(self) -> str:
        return "" if self.value is None else str(self.value)


@dataclass(frozen=True)
class RequestBody:
    """Raw request payload and its content type."""

    content: bytes
    content_type: str | None = None

    @staticmethod
    def of(content: str | bytes, content_type: str | None = None) -> "RequestBody":
        if isinstance(content, str):
            content = content.encode("utf-8")
        return RequestBody(content=bytes(content), content_type=content_type)


@dataclass(frozen=True)
class Response:
    """Snapshot of one hop: status line, headers and the raw body."""

    status_code: int
    status_message: str = ""
    headers: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    body: bytes | None = b""
    url: str = ""

    @property
    def is_redirect(self) -> bool:
        return self.status_code // 100 == 3

    @property
    def location(self) -> str | None:
        return self.header(LOCATION_HEADER)

    def header(self, name: str) -> str | None:
        """First value of ``name`` (case-insensitive), or None."""
        wanted = name.lower()
        for key, values in self.headers.items():
            if key.lower() == wanted and values:
                return values[0]
        return None

    @property
    def text(self) -> str:
        return (self.body or b"").decode("utf-8", errors="replace")

    def __str__(self) -> str:
        lines = [f"{self.status_code} {self.status_message}".rstrip()]
        for key, values in self.headers.items():
            lines.append(f"{key}: {list(values)}")
        return "\n".join(lines)


def headers_from_items(items: list[tuple[str, str]]) -> dict[str, tuple[str, ...]]:
    """Group raw header items into name -> values, keeping first-seen name spelling and order."""
    grouped: dict[str, list[str]] = {}
    spelling: dict[str, str] = {}
    for key, value in items:
        lowered = key.lower()
        name = spelling.setdefault(lowered, key)
        grouped.setdefault(name, []).append(value)
    return {name: tuple(values) for name, values in grouped.items()}
