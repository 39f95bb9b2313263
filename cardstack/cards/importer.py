"""
TSV import: convert ``term<TAB>definition`` rows into cards.

Open cards accept several answers; in the answer column alternatives can
be separated by semicolons, slashes or commas.
"""

from __future__ import annotations

import re
from enum import Enum

from loguru import logger

from .models import Card, Definition, Gap, OpenQuestion

_ALTERNATIVES = re.compile(r"[;/,]")


class ImportType(str, Enum):
    """Card kind produced by the converter."""

    OPEN = "open"
    DEF = "def"


def _row_to_card(import_type: ImportType, question: str, answer: str) -> Card | None:
    if import_type is ImportType.DEF:
        return Definition(title=question, definition=answer)
    answers = tuple(a.strip() for a in _ALTERNATIVES.split(answer) if a.strip())
    if not answers:
        return None
    return OpenQuestion(title=question, segments=("", ""), gaps=(Gap(answers),))


def parse_import_input(import_type: ImportType, reverse: bool, text: str) -> list[Card] | None:
    """
    Convert TSV text into cards.

    Args:
        import_type: open questions or definitions
        reverse: use the right column as the question
        text: file contents

    Returns:
        The cards, or None if any row is malformed
    """
    cards: list[Card] = []
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        fields = line.split("\t")
        if len(fields) != 2:
            logger.warning("Row {} has {} columns, expected 2", number, len(fields))
            return None
        question, answer = (f.strip() for f in fields)
        if reverse:
            question, answer = answer, question
        if not question or not answer:
            logger.warning("Row {} has an empty column", number)
            return None
        card = _row_to_card(import_type, question, answer)
        if card is None:
            logger.warning("Row {} has no usable answers", number)
            return None
        cards.append(card)
    return cards
