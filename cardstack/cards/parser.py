"""
Deck parser and serializer.

Deck format (Markdown-ish):

    # What is the capital of France?
    Paris
    ---
    # Fill in the blank
    The powerhouse of the cell is the _mitochondria|mitochondrion_.

Cards are separated by lines consisting of ``---``. Each card starts with a
``# `` header holding the question. A body containing ``_answer_`` gaps
(alternatives separated by ``|``) is an open question, anything else is a
definition.
"""

from __future__ import annotations

import re

from loguru import logger

from .models import Card, Definition, Gap, OpenQuestion

SEPARATOR = "---"
_GAP_PATTERN = re.compile(r"_([^_\n]+)_")


class ParseError(Exception):
    """Deck text that does not follow the card format."""

    def __init__(self, line: int, message: str):
        super().__init__(f"Parse error on line {line}: {message}")
        self.line = line
        self.message = message


def _split_blocks(text: str) -> list[tuple[int, list[str]]]:
    """Split into (first line number, lines) blocks on separator lines."""
    blocks: list[tuple[int, list[str]]] = []
    current: list[str] = []
    start = 1
    for number, line in enumerate(text.splitlines(), start=1):
        if line.strip() == SEPARATOR:
            blocks.append((start, current))
            current = []
            start = number + 1
        else:
            current.append(line)
    blocks.append((start, current))
    return blocks


def _parse_body(title: str, body: str, line: int) -> Card:
    if not _GAP_PATTERN.search(body):
        return Definition(title=title, definition=body)

    segments: list[str] = []
    gaps: list[Gap] = []
    position = 0
    for match in _GAP_PATTERN.finditer(body):
        segments.append(body[position:match.start()])
        answers = tuple(a.strip() for a in match.group(1).split("|"))
        if any(not a for a in answers):
            raise ParseError(line, f"empty answer in gap '{match.group(0)}'")
        gaps.append(Gap(answers))
        position = match.end()
    segments.append(body[position:])
    return OpenQuestion(title=title, segments=tuple(segments), gaps=tuple(gaps))


def parse_cards(text: str) -> list[Card]:
    """
    Parse deck text into cards.

    Raises:
        ParseError: a non-empty block without a ``# `` header, or a gap
            with an empty alternative
    """
    cards: list[Card] = []
    for start, lines in _split_blocks(text):
        # skip leading blank lines, remembering where the header really is
        offset = 0
        while offset < len(lines) and not lines[offset].strip():
            offset += 1
        if offset == len(lines):
            continue

        header = lines[offset].strip()
        line = start + offset
        if not header.startswith("#"):
            raise ParseError(line, f"expected a '# question' header, found '{header}'")
        title = header.lstrip("#").strip()
        if not title:
            raise ParseError(line, "the question header is empty")

        body = "\n".join(lines[offset + 1:]).strip()
        cards.append(_parse_body(title, body, line + 1))

    logger.debug("Parsed {} cards", len(cards))
    return cards


def card_to_string(card: Card) -> str:
    if isinstance(card, Definition):
        return f"# {card.title}\n{card.definition}"
    body = card.segments[0]
    for gap, segment in zip(card.gaps, card.segments[1:]):
        body += "_" + "|".join(gap.answers) + "_" + segment
    return f"# {card.title}\n{body}"


def cards_to_string(cards: list[Card]) -> str:
    """Serialize cards back into deck text."""
    return f"\n{SEPARATOR}\n".join(card_to_string(card) for card in cards) + "\n"
