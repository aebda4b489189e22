"""Byte stream helpers."""
from __future__ import annotations

from typing import BinaryIO, Iterable

from fluenthttp.app.constants import READ_CHUNK_SIZE


def copy(source: Iterable[bytes] | BinaryIO, sink: BinaryIO, *, chunk_size: int = READ_CHUNK_SIZE) -> int:
    """Copy every chunk of ``source`` into ``sink`` and return the number of bytes written.

    ``source`` is either a readable binary file object (read ``chunk_size`` at a time)
    or an iterable of byte chunks such as ``httpx.Response.iter_bytes()``.
    Neither side is closed here; callers own both streams.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    if hasattr(source, "read"):
        chunks: Iterable[bytes] = iter(lambda: source.read(chunk_size), b"")  # type: ignore[union-attr]
    else:
        chunks = source

    total = 0
    for chunk in chunks:
        if not chunk:
            continue
        sink.write(chunk)
        total += len(chunk)
    return total
