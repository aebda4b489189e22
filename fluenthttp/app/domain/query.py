"""Query string and header assembly from pairs."""
from __future__ import annotations

from typing import Iterable
from urllib.parse import quote_plus

from fluenthttp.app.domain.models import Pair


def is_valid_pair(pair: object) -> bool:
    return isinstance(pair, Pair) and pair.key is not None and bool(str(pair.key).strip())


def valid_pairs(pairs: Iterable[Pair | None]) -> tuple[Pair, ...]:
    """Drop None and blank-key entries, keeping the order of the rest."""
    return tuple(pair for pair in pairs if is_valid_pair(pair))  # type: ignore[misc]


def encode_pair(pair: Pair) -> str:
    return f"{quote_plus(pair.key)}={quote_plus(pair.text_value)}"


def prepare_query_string(pairs: Iterable[Pair | None] | None) -> str:
    """URL-encoded ``key=value`` entries joined by ``&``; empty string for no pairs."""
    if not pairs:
        return ""
    return "&".join(encode_pair(pair) for pair in valid_pairs(pairs))


def append_query(url: str, pairs: Iterable[Pair | None] | None) -> str:
    query_string = prepare_query_string(pairs)
    if not query_string:
        return url
    join_char = "&" if "?" in url else "?"
    return f"{url}{join_char}{query_string}"


def assemble_headers(pairs: Iterable[Pair | None] | None) -> dict[str, str]:
    """Header map from pairs: key and value trimmed, a later pair replaces an earlier one
    with the same case-insensitive name."""
    headers: dict[str, str] = {}
    names: dict[str, str] = {}
    for pair in valid_pairs(pairs or ()):
        key = pair.key.strip()
        lowered = key.lower()
        previous = names.get(lowered)
        if previous is not None:
            del headers[previous]
        names[lowered] = key
        headers[key] = pair.text_value.strip()
    return headers


__all__ = [
    "is_valid_pair",
    "valid_pairs",
    "encode_pair",
    "prepare_query_string",
    "append_query",
    "assemble_headers",
]
