"""
Deck file resolution and loading.
"""

from __future__ import annotations

from pathlib import Path

from .models import Card
from .parser import parse_cards

DECK_SUFFIXES = (".txt", ".md")


class DeckPathError(Exception):
    """The given path does not name a usable deck file."""


def resolve_deck_path(raw: str | Path) -> Path:
    """
    Resolve a user-supplied deck path.

    ``.txt`` and ``.md`` are taken as is. Without an extension both are
    tried, and exactly one of them must exist.

    Raises:
        DeckPathError: unsupported extension, or the extension-less name is
            missing or ambiguous
    """
    path = Path(raw)
    if path.suffix in DECK_SUFFIXES:
        return path
    if path.suffix:
        raise DeckPathError("Incorrect file type, provide a .txt file")

    txt, md = path.with_suffix(".txt"), path.with_suffix(".md")
    has_txt, has_md = txt.is_file(), md.is_file()
    if has_txt and has_md:
        raise DeckPathError(
            "Both a .txt and .md file of this name exist, and it is unclear "
            "which to use. Specify the file extension."
        )
    if has_txt:
        return txt
    if has_md:
        return md
    raise DeckPathError(
        f'No .txt or .md file with the name "{path.name}" '
        f'in the directory "{path.parent}"'
    )


def load_deck(path: Path) -> list[Card]:
    """Read and parse a deck. OSError and ParseError propagate."""
    return parse_cards(path.read_text(encoding="utf-8"))
