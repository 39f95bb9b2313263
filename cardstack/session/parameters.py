"""
Session parameters: shuffle, subset, chunk and review mode.

Built once from user input at session start and never mutated afterwards.
Both dataclasses validate in ``__post_init__`` so an invalid Chunk or
Parameters value can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from loguru import logger

from .errors import InvalidChunk, InvalidSubset

_CHUNK_PATTERN = re.compile(r"^\s*(-?\d+)\s*/\s*(-?\d+)\s*$")


@dataclass(frozen=True)
class Chunk:
    """The ``index``-th (1-based) of ``count`` contiguous partitions of a deck."""

    index: int
    count: int

    def __post_init__(self) -> None:
        if self.count < 1:
            raise InvalidChunk(
                f"The number of chunks must be at least 1, got {self.count}",
                self.index,
                self.count,
            )
        if not 1 <= self.index <= self.count:
            raise InvalidChunk(
                f"Chunk index must be between 1 and {self.count}, got {self.index}",
                self.index,
                self.count,
            )

    @classmethod
    def parse(cls, text: str) -> Chunk:
        """Parse ``"i/n"`` as typed on the command line."""
        match = _CHUNK_PATTERN.match(text)
        if match is None:
            raise InvalidChunk(f"Chunks should be written as i/n, e.g. 2/5, got {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def whole(cls) -> Chunk:
        return cls(1, 1)

    def __str__(self) -> str:
        return f"{self.index}/{self.count}"


@dataclass(frozen=True)
class Parameters:
    """Configuration for one review session."""

    shuffle: bool = False
    subset: int | None = None
    chunk: Chunk = Chunk(1, 1)
    review_mode: bool = True
    validated: bool = False

    def __post_init__(self) -> None:
        if self.subset is not None and self.subset <= 0:
            raise InvalidSubset(self.subset)

    @classmethod
    def from_options(
        cls,
        shuffle: bool = False,
        amount: int | None = None,
        chunk: str | Chunk | None = None,
        blank: bool = False,
    ) -> Parameters:
        """
        Build parameters from raw command line fields.

        Args:
            shuffle: Randomize card order
            amount: Use only the first ``amount`` cards, None for all of them
            chunk: ``"i/n"`` text or a Chunk, None for the whole deck
            blank: Disable review mode

        Raises:
            ConfigurationError: when chunk or amount are out of range
        """
        if chunk is None:
            chunk = Chunk.whole()
        elif isinstance(chunk, str):
            chunk = Chunk.parse(chunk)
        return cls(shuffle=shuffle, subset=amount, chunk=chunk, review_mode=not blank)

    def validate_for(self, deck_size: int) -> Parameters:
        """Range-check against the actual deck and return a validated copy."""
        if deck_size < 0:
            raise ValueError(f"Deck size cannot be negative, got {deck_size}")
        if self.chunk.count > deck_size:
            logger.warning(
                "Splitting {} cards into {} chunks leaves some chunks empty",
                deck_size,
                self.chunk.count,
            )
        if self.subset is not None and self.subset > deck_size:
            logger.debug("Amount {} exceeds deck size {}, using all cards", self.subset, deck_size)
        return replace(self, validated=True)

    def describe(self) -> str:
        """Short human-readable summary, shown in the cards screen header."""
        parts = []
        if self.shuffle:
            parts.append("shuffled")
        if self.chunk.count > 1:
            parts.append(f"chunk {self.chunk}")
        if self.subset is not None:
            parts.append(f"first {self.subset}")
        parts.append("review" if self.review_mode else "blank")
        return ", ".join(parts)
