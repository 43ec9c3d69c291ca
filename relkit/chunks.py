"""Batching of sized items and the chunks that make up a chunked upload."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, TypeVar

ASSEMBLE_POLL_INTERVAL = timedelta(milliseconds=1000)
"""Interval for polling the assemble endpoints."""

T = TypeVar("T")


@dataclass(frozen=True)
class Chunk:
    """A piece of a file to upload, with the SHA1 checksum of its data."""

    checksum: str
    data: bytes

    def size(self) -> int:
        """Return the number of bytes in this chunk."""
        return len(self.data)


def item_size(item: Any) -> int:
    """Return the logical size of an item.

    Non-negative integers are their own size; any other item must provide a
    ``size()`` method.
    """
    if isinstance(item, int) and not isinstance(item, bool):
        if item < 0:
            raise ValueError("item size must not be negative")
        return item
    size = getattr(item, "size", None)
    if not callable(size):
        raise TypeError(f"{type(item).__name__!r} object has no size")
    return int(size())


def batches(
    items: Sequence[T], max_size: int, max_items: int
) -> Iterator[tuple[list[T], int]]:
    """Yield continuous batches of ``items`` with their combined size.

    Each batch holds items with a combined size of up to ``max_size``, but at
    least one item (possibly exceeding ``max_size``) and at most ``max_items``.
    """
    if max_items < 1:
        raise ValueError("max_items must be at least 1")

    batch: list[T] = []
    size = 0
    for item in items:
        next_size = item_size(item)
        if batch and (len(batch) >= max_items or size + next_size > max_size):
            yield batch, size
            batch, size = [], 0
        batch.append(item)
        size += next_size

    if batch:
        yield batch, size