"""
Deck transformation: derive the session's card sequence from a parsed deck.

Pipeline, always in this order:
1. shuffle the whole deck (if requested)
2. slice out the requested chunk
3. keep the first ``subset`` cards of that chunk

Chunking runs on the shuffled order and the subset narrows the chunk,
so "chunk i of n" always refers to the whole deck.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from loguru import logger

from .chunking import chunk_range
from .parameters import Parameters
from .random_source import RandomSource

T = TypeVar("T")


def transform(cards: Sequence[T], params: Parameters, rng: RandomSource) -> list[T]:
    """Return the ordered cards for a session. The result may be empty."""
    working = rng.permutation(cards) if params.shuffle else list(cards)

    selected = chunk_range(len(working), params.chunk)
    working = working[selected.start:selected.stop]

    if params.subset is not None:
        working = working[: params.subset]

    return working


class DeckTransformer:
    """Runs :func:`transform` against a fixed RandomSource."""

    def __init__(self, rng: RandomSource):
        self.rng = rng

    def __call__(self, cards: Sequence[T], params: Parameters) -> list[T]:
        result = transform(cards, params, self.rng)
        logger.debug(
            "Deck of {} cards -> {} cards ({})",
            len(cards),
            len(result),
            params.describe(),
        )
        return result
