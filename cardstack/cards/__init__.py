"""
Cards: the deck model plus everything that reads or writes deck files.
"""

from cardstack.cards.files import DeckPathError, load_deck, resolve_deck_path
from cardstack.cards.importer import ImportType, parse_import_input
from cardstack.cards.models import Card, Definition, Gap, OpenQuestion
from cardstack.cards.parser import ParseError, cards_to_string, parse_cards
from cardstack.cards.recent import RecentFiles

__all__ = [
    "Card",
    "Definition",
    "Gap",
    "OpenQuestion",
    "ParseError",
    "parse_cards",
    "cards_to_string",
    "ImportType",
    "parse_import_input",
    "DeckPathError",
    "resolve_deck_path",
    "load_deck",
    "RecentFiles",
]
