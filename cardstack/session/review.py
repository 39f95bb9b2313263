"""
Per-card review outcomes for one pass over the session's cards.

Positions index into the session's card sequence. The tracker only
records verdicts; judging an answer happens in the interface layer.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from loguru import logger

from .errors import OutcomePositionError

T = TypeVar("T")


class ReviewOutcome(str, Enum):
    """Latest verdict for a card."""

    UNSEEN = "unseen"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass(frozen=True)
class ReviewSummary:
    """Counts per outcome."""

    correct: int
    incorrect: int
    unseen: int

    @property
    def total(self) -> int:
        return self.correct + self.incorrect + self.unseen

    @property
    def seen(self) -> int:
        return self.correct + self.incorrect


class ReviewTracker:
    """
    Outcome ledger for a review pass.

    Every position starts UNSEEN. Recording an outcome overwrites the
    previous one, so a card answered wrong and later right ends CORRECT.
    """

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"Tracker size cannot be negative, got {size}")
        self._outcomes = [ReviewOutcome.UNSEEN] * size

    def __len__(self) -> int:
        return len(self._outcomes)

    def _check(self, position: int) -> None:
        if not 0 <= position < len(self._outcomes):
            raise OutcomePositionError(position, len(self._outcomes))

    def record(self, position: int, correct: bool) -> None:
        """Record the verdict for ``position``."""
        self._check(position)
        outcome = ReviewOutcome.CORRECT if correct else ReviewOutcome.INCORRECT
        self._outcomes[position] = outcome
        logger.debug("Card {} marked {}", position, outcome.value)

    def mark_correct(self, position: int) -> None:
        self.record(position, True)

    def mark_incorrect(self, position: int) -> None:
        self.record(position, False)

    def outcome(self, position: int) -> ReviewOutcome:
        self._check(position)
        return self._outcomes[position]

    def remaining(self) -> list[int]:
        """Positions not yet CORRECT, in session order."""
        return [i for i, o in enumerate(self._outcomes) if o is not ReviewOutcome.CORRECT]

    def incorrect(self) -> list[int]:
        """Positions whose latest verdict is INCORRECT, in session order."""
        return [i for i, o in enumerate(self._outcomes) if o is ReviewOutcome.INCORRECT]

    def is_complete(self) -> bool:
        return all(o is ReviewOutcome.CORRECT for o in self._outcomes)

    def summary(self) -> ReviewSummary:
        return ReviewSummary(
            correct=self._outcomes.count(ReviewOutcome.CORRECT),
            incorrect=self._outcomes.count(ReviewOutcome.INCORRECT),
            unseen=self._outcomes.count(ReviewOutcome.UNSEEN),
        )

    def retry_sequence(self, cards: Sequence[T]) -> list[T]:
        """Cards to revisit in a retry pass: exactly the INCORRECT ones."""
        if len(cards) != len(self._outcomes):
            raise ValueError(
                f"Tracker covers {len(self._outcomes)} cards, got a sequence of {len(cards)}"
            )
        return [cards[i] for i in self.incorrect()]
