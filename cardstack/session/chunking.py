"""
Chunk selection: split a deck into near-equal contiguous groups.

For N cards and n chunks each group has N // n cards and the first
N % n groups get one extra. With n > N the trailing groups are empty.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .errors import InvalidChunk
from .parameters import Chunk

T = TypeVar("T")


def chunk_bounds(deck_length: int, index: int, count: int) -> range:
    """
    Half-open index range of the ``index``-th of ``count`` groups.

    Validates raw integers, since they may come straight from user input.

    Raises:
        InvalidChunk: count < 1 or index outside [1, count]
    """
    if count < 1 or not 1 <= index <= count:
        raise InvalidChunk(
            f"Chunk {index}/{count} is invalid: need 1 <= index <= count",
            index,
            count,
        )
    if deck_length < 0:
        raise ValueError(f"Deck length cannot be negative, got {deck_length}")

    size, extra = divmod(deck_length, count)
    i = index - 1
    start = i * size + min(i, extra)
    stop = start + size + (1 if i < extra else 0)
    return range(start, stop)


def chunk_range(deck_length: int, chunk: Chunk) -> range:
    """Range selected by an already validated Chunk."""
    return chunk_bounds(deck_length, chunk.index, chunk.count)


def split_into_chunks(items: Sequence[T], count: int) -> list[list[T]]:
    """All ``count`` groups of ``items``, in order."""
    return [
        [items[i] for i in chunk_bounds(len(items), index, count)]
        for index in range(1, count + 1)
    ]
