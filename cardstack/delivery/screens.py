"""
Review screens.

Each screen renders itself with rich, reads one round of input and then
asks the SessionState to navigate (go_to_state / move_to_state / go_back).
Screens that want to resume where they left off return a snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.text import Text

from cardstack.cards import (
    Card,
    Definition,
    DeckPathError,
    OpenQuestion,
    ParseError,
    RecentFiles,
    load_deck,
    resolve_deck_path,
)
from cardstack.config import Settings
from cardstack.session import ConfigurationError, Parameters, Screen, SessionState, StateKey

from . import visuals as ui
from .judging import judge_definition, judge_open_question, render_open_question

CONTROLS_TEXT = (
    "[bold]Menus[/bold]: type the number of an option, Enter keeps the highlighted one.\n"
    "[bold]Cards[/bold]: Enter to answer, [cyan]q[/cyan] to leave the deck, "
    "[cyan]?[/cyan] for this help.\n"
    "[bold]Definitions[/bold]: answer y/n after seeing the back; ? counts as n.\n"
    "[bold]Open questions[/bold]: type one answer per blank."
)


@dataclass
class ScreenContext:
    """Things every screen needs besides the session."""

    console: Console
    settings: Settings
    recents: RecentFiles


class InteractiveScreen(Screen, Protocol):
    """A screen the interactive loop can drive."""

    def step(self, session: SessionState, ctx: ScreenContext) -> None:
        """Render, read one round of input and navigate."""
        ...


@dataclass(frozen=True)
class MenuSnapshot:
    selected: int


@dataclass(frozen=True)
class CardsSnapshot:
    index: int


def _choose(console: Console, options: list[str], selected: int) -> int:
    """Prompt for a 1-based option number; returns a 0-based index."""
    choices = [str(i) for i in range(1, len(options) + 1)]
    answer = Prompt.ask(
        "Choice",
        choices=choices,
        default=str(selected + 1),
        console=console,
    )
    return int(answer) - 1


def open_deck(session: SessionState, ctx: ScreenContext, raw_path: str | Path) -> bool:
    """
    Load a deck and push its review options screen.

    Path, I/O and parse errors are shown and leave navigation untouched.
    """
    try:
        path = resolve_deck_path(raw_path)
        deck = load_deck(path)
    except (DeckPathError, ParseError) as e:
        ctx.console.print(f"[red]{escape(str(e))}[/red]")
        return False
    except OSError as e:
        ctx.console.print(f"[red]Could not read {escape(str(raw_path))}: {escape(str(e))}[/red]")
        return False

    ctx.recents.add(path)
    logger.info("Opened {} ({} cards)", path, len(deck))
    session.go_to_state(ParametersScreen(path, deck))
    return True


def first_review_screen(cards: list[Card]) -> InteractiveScreen:
    """The screen that starts a prepared pass: the first card, or an empty-chunk notice."""
    if not cards:
        return InfoScreen("Empty chunk", "There are no cards in this chunk.")
    return CardsScreen()


# =============================================================================
# Review options
# =============================================================================


class ParametersScreen:
    """
    Review options for a freshly opened deck.

    Starts from the session's current parameters (the command line options)
    and only prepares the cards once the options validate. Invalid input is
    reported and the screen asks again.
    """

    key = StateKey.PARAMETERS

    def __init__(self, path: Path, deck: list[Card]):
        self.path = path
        self.deck = deck

    def snapshot(self) -> None:
        return None

    def restore(self, snapshot: object) -> None:
        pass

    def step(self, session: SessionState, ctx: ScreenContext) -> None:
        console = ctx.console
        current = session.parameters
        console.print(ui.parameters_panel(self.path.name, len(self.deck), current))

        command = Prompt.ask(
            "[dim]Enter to choose options, q to go back[/dim]",
            default="",
            show_default=False,
            console=console,
        ).strip().lower()
        if command == "q":
            session.go_back()
            return

        shuffle = Confirm.ask("Shuffle", default=current.shuffle, console=console)
        raw_amount = Prompt.ask(
            "Amount [dim](blank for all)[/dim]",
            default="" if current.subset is None else str(current.subset),
            show_default=False,
            console=console,
        ).strip()
        chunk = Prompt.ask("Chunk", default=str(current.chunk), console=console).strip()
        review_mode = Confirm.ask("Review mode", default=current.review_mode, console=console)

        try:
            amount = int(raw_amount) if raw_amount else None
        except ValueError:
            console.print(f"[red]Amount must be a whole number, got {escape(raw_amount)}[/red]")
            return
        try:
            params = Parameters.from_options(
                shuffle=shuffle, amount=amount, chunk=chunk, blank=not review_mode
            )
        except ConfigurationError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            return

        cards = session.prepare_cards(self.deck, params)
        logger.info("Reviewing {} of {} cards from {}", len(cards), len(self.deck), self.path)
        session.move_to_state(first_review_screen(cards))


# =============================================================================
# Menus
# =============================================================================


class MainMenuScreen:
    """Root screen."""

    key = StateKey.MAIN_MENU
    OPTIONS = ["Review a deck", "Recent decks", "Controls", "Quit"]

    def __init__(self) -> None:
        self.selected = 0

    def snapshot(self) -> MenuSnapshot:
        return MenuSnapshot(self.selected)

    def restore(self, snapshot: MenuSnapshot) -> None:
        self.selected = snapshot.selected

    def step(self, session: SessionState, ctx: ScreenContext) -> None:
        ctx.console.print(ui.menu_panel("CARDSTACK", self.OPTIONS, self.selected))
        self.selected = _choose(ctx.console, self.OPTIONS, self.selected)

        if self.selected == 0:
            raw = Prompt.ask("Deck file", console=ctx.console).strip()
            if raw:
                open_deck(session, ctx, raw)
        elif self.selected == 1:
            session.go_to_state(RecentFilesScreen())
        elif self.selected == 2:
            session.go_to_state(InfoScreen("Controls", CONTROLS_TEXT))
        else:
            session.terminate()


class RecentFilesScreen:
    """Pick one of the recently opened decks."""

    key = StateKey.RECENT_FILES

    def __init__(self) -> None:
        self.selected = 0

    def snapshot(self) -> MenuSnapshot:
        return MenuSnapshot(self.selected)

    def restore(self, snapshot: MenuSnapshot) -> None:
        self.selected = snapshot.selected

    def step(self, session: SessionState, ctx: ScreenContext) -> None:
        decks = ctx.recents.list()
        options = [path.name for path in decks] + ["Back"]
        self.selected = min(self.selected, len(options) - 1)
        ctx.console.print(ui.menu_panel("RECENT DECKS", options, self.selected))
        self.selected = _choose(ctx.console, options, self.selected)

        if self.selected == len(decks):
            session.go_back()
        else:
            open_deck(session, ctx, decks[self.selected])


class InfoScreen:
    """Static text; any key returns to the previous screen."""

    key = StateKey.INFO

    def __init__(self, title: str, text: str):
        self.title = title
        self.text = text

    def snapshot(self) -> None:
        return None

    def restore(self, snapshot: object) -> None:
        pass

    def step(self, session: SessionState, ctx: ScreenContext) -> None:
        ctx.console.print(ui.info_panel(self.title, self.text))
        Prompt.ask("[dim]Press Enter to go back[/dim]", default="", show_default=False,
                   console=ctx.console)
        if session.can_go_back():
            session.go_back()
        else:
            session.terminate()


# =============================================================================
# Review
# =============================================================================


class CardsScreen:
    """One card of the session's sequence."""

    key = StateKey.CARDS

    def __init__(self, index: int = 0):
        self.index = index

    def snapshot(self) -> CardsSnapshot:
        return CardsSnapshot(self.index)

    def restore(self, snapshot: CardsSnapshot) -> None:
        self.index = snapshot.index

    def _leave(self, session: SessionState) -> None:
        if session.can_go_back():
            session.go_back()
        else:
            session.terminate()

    def step(self, session: SessionState, ctx: ScreenContext) -> None:
        cards = session.cards or []
        card = cards[self.index]
        console = ctx.console

        if isinstance(card, OpenQuestion):
            body = f"[bold]{escape(card.title)}[/bold]\n\n{render_open_question(card)}"
        else:
            body = f"[bold]{escape(card.title)}[/bold]"
        console.print(
            ui.question_panel(body, self.index, len(cards), session.parameters.describe())
        )

        command = Prompt.ask(
            "[dim]Enter to answer, q to leave, ? for help[/dim]",
            default="",
            show_default=False,
            console=console,
        ).strip().lower()
        if command == "q":
            self._leave(session)
            return
        if command == "?":
            session.go_to_state(InfoScreen("Controls", CONTROLS_TEXT))
            return

        if isinstance(card, Definition):
            correct = self._review_definition(card, session, ctx)
        else:
            correct = self._review_open_question(card, ctx)

        if correct is not None:
            session.record_answer(self.index, correct)

        if self.index + 1 < len(cards):
            session.move_to_state(CardsScreen(self.index + 1))
        else:
            session.move_to_state(FinishedScreen())

    def _review_definition(
        self, card: Definition, session: SessionState, ctx: ScreenContext
    ) -> bool | None:
        ctx.console.print(ui.answer_panel(escape(card.definition)))
        if not session.parameters.review_mode:
            return None
        while True:
            verdict = judge_definition(
                Prompt.ask("Did you recall correctly? [y/n/?]", default="y", console=ctx.console)
            )
            if verdict is not None:
                return verdict
            ctx.console.print("[yellow]Please enter y, n, or ?[/yellow]")

    def _review_open_question(self, card: OpenQuestion, ctx: ScreenContext) -> bool:
        answers = [
            Prompt.ask(f"Blank {number}", console=ctx.console)
            for number in range(1, len(card.gaps) + 1)
        ]
        correct = judge_open_question(card, answers, ctx.settings.case_sensitive)
        revealed = Text.from_markup(render_open_question(card, reveal=True))
        ctx.console.print(ui.result_panel(correct, revealed))
        return correct


class FinishedScreen:
    """End of a pass: results, and the option to retry incorrect cards."""

    key = StateKey.FINISHED

    def snapshot(self) -> None:
        return None

    def restore(self, snapshot: object) -> None:
        pass

    def step(self, session: SessionState, ctx: ScreenContext) -> None:
        tracker = session.tracker
        options: list[str] = []
        if tracker is not None:
            ctx.console.print(ui.summary_table(tracker.summary()))
            if tracker.incorrect():
                options.append("Retry incorrect cards")
        else:
            ctx.console.print(ui.info_panel("Finished", "You went through every card."))
        if session.can_go_back():
            options.append("Back")
        options.append("Quit")

        ctx.console.print(ui.menu_panel("FINISHED", options, 0))
        choice = options[_choose(ctx.console, options, 0)]

        if choice == "Retry incorrect cards":
            session.start_retry()
            session.move_to_state(CardsScreen())
        elif choice == "Back":
            session.go_back()
        else:
            session.terminate()
