"""
Card types produced by the deck parser.

The session core never looks inside a card; only the parser, the
serializer and the review screens do.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Definition:
    """Question on the front, free text on the back. Self-graded."""

    title: str
    definition: str


@dataclass(frozen=True)
class Gap:
    """A blank in an open question; any of ``answers`` fills it."""

    answers: tuple[str, ...]


@dataclass(frozen=True)
class OpenQuestion:
    """
    Question with blanks to type in.

    ``segments`` holds the text around the gaps: text before the first gap,
    between gaps and after the last one (possibly empty), so
    ``len(segments) == len(gaps) + 1``.
    """

    title: str
    segments: tuple[str, ...]
    gaps: tuple[Gap, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if len(self.segments) != len(self.gaps) + 1:
            raise ValueError(
                f"Open question needs {len(self.gaps) + 1} text segments, "
                f"got {len(self.segments)}"
            )


Card = Union[Definition, OpenQuestion]
