"""
Delivery: the rich-based interface layer on top of the session core.
"""

from cardstack.delivery.runner import run_session
from cardstack.delivery.screens import (
    CardsScreen,
    FinishedScreen,
    InfoScreen,
    InteractiveScreen,
    MainMenuScreen,
    ParametersScreen,
    RecentFilesScreen,
    ScreenContext,
    first_review_screen,
    open_deck,
)

__all__ = [
    "run_session",
    "ScreenContext",
    "InteractiveScreen",
    "MainMenuScreen",
    "RecentFilesScreen",
    "ParametersScreen",
    "InfoScreen",
    "CardsScreen",
    "FinishedScreen",
    "open_deck",
    "first_review_screen",
]
