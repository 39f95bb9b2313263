"""
cardstack CLI - review flashcard decks in the terminal.

Usage:
    cardstack                       # Open the main menu
    cardstack run deck.txt          # Review a deck directly
    cardstack run deck -s -a 20     # Shuffle, then review the first 20 cards
    cardstack run deck -c 2/5       # Review the 2nd of 5 chunks
    cardstack import words.tsv deck.txt --type def
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from cardstack import __version__
from cardstack.cards import (
    DeckPathError,
    ImportType,
    ParseError,
    RecentFiles,
    cards_to_string,
    load_deck,
    parse_import_input,
    resolve_deck_path,
)
from cardstack.config import Settings, get_settings
from cardstack.delivery import MainMenuScreen, ScreenContext, first_review_screen, run_session
from cardstack.logs import configure_logging
from cardstack.session import ConfigurationError, Parameters, RandomSource, SessionState

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="cardstack",
    help="Cardstack - a TUI for reviewing notes",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def _error(message: str) -> typer.Exit:
    console.print(f"[red]{escape(message)}[/red]")
    return typer.Exit(code=1)


def _set_cursor_shape(settings: Settings) -> None:
    # blinking bar, so typing answers looks like a text field
    if settings.use_escape_code and console.is_terminal:
        sys.stdout.write("\x1b[5 q")
        sys.stdout.flush()


def _make_session(settings: Settings, parameters: Parameters | None = None) -> tuple[SessionState, ScreenContext]:
    session = SessionState(RandomSource(settings.seed), parameters)
    ctx = ScreenContext(
        console=console,
        settings=settings,
        recents=RecentFiles(settings.recents_path, settings.max_recents),
    )
    return session, ctx


def _version_callback(value: bool) -> None:
    if value:
        console.print(__version__)
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version", "-v", help="Show version number",
            callback=_version_callback, is_eager=True,
        ),
    ] = False,
) -> None:
    """
    Run the normal application with `cardstack`. To run directly on a file,
    and with CLI options, see `cardstack run --help`. For converting TAB
    separated files, see `cardstack import --help`.
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_file)
    if ctx.invoked_subcommand is not None:
        return

    _set_cursor_shape(settings)
    session, screen_ctx = _make_session(settings)
    session.go_to_state(MainMenuScreen())
    run_session(session, screen_ctx)


# =============================================================================
# Review
# =============================================================================


@app.command()
def run(
    file: Annotated[
        Optional[str], typer.Argument(metavar="FILE", help="A .txt or .md file containing flashcards")
    ] = None,
    amount: Annotated[
        Optional[int],
        typer.Option(
            "--amount", "-a", metavar="n",
            help="Use the first n cards in the deck (most useful combined with shuffle)",
        ),
    ] = None,
    chunk: Annotated[
        str,
        typer.Option(
            "--chunk", "-c", metavar="i/n",
            help="Split the deck into n chunks, and review the i'th one. Counting starts at 1.",
        ),
    ] = "1/1",
    shuffle: Annotated[
        bool, typer.Option("--shuffle", "-s", help="Randomize card order")
    ] = False,
    blank: Annotated[
        bool,
        typer.Option(
            "--blank", "-b",
            help="Disable review mode: do not keep track of which questions "
            "were correctly and incorrectly answered",
        ),
    ] = False,
) -> None:
    """Run cardstack with CLI options."""
    settings = get_settings()
    try:
        parameters = Parameters.from_options(shuffle=shuffle, amount=amount, chunk=chunk, blank=blank)
    except ConfigurationError as e:
        raise _error(str(e))

    if file is None:
        _set_cursor_shape(settings)
        session, screen_ctx = _make_session(settings, parameters)
        session.go_to_state(MainMenuScreen())
        run_session(session, screen_ctx)
        return

    try:
        path = resolve_deck_path(file)
        deck = load_deck(path)
    except DeckPathError as e:
        raise _error(str(e))
    except OSError as e:
        raise _error(f"Could not read {file}: {e}")
    except ParseError as e:
        raise _error(str(e))

    session, screen_ctx = _make_session(settings, parameters)
    screen_ctx.recents.add(path)
    cards = session.prepare_cards(deck)
    logger.info("Reviewing {} of {} cards from {}", len(cards), len(deck), path)

    _set_cursor_shape(settings)
    session.go_to_state(first_review_screen(cards))
    run_session(session, screen_ctx)


# =============================================================================
# Import
# =============================================================================


@app.command("import")
def import_deck(
    input_file: Annotated[Path, typer.Argument(metavar="INPUT", help="A TSV file")],
    output_file: Annotated[
        Path,
        typer.Argument(metavar="DESTINATION", help="The filename/path to which the output should be saved"),
    ],
    import_type: Annotated[
        ImportType,
        typer.Option(
            "--type", "-t", metavar="'open' or 'def'",
            help="The type of card to which the input is transformed, default: open",
            case_sensitive=False,
        ),
    ] = ImportType.OPEN,
    reverse: Annotated[
        bool,
        typer.Option(
            "--reverse", "-r",
            help="Reverse direction of question and answer, i.e. right part becomes the question.",
        ),
    ] = False,
) -> None:
    """
    Convert a TAB delimited file to cardstack syntax.

    Terms and definitions are separated by tabs, rows by new lines. When
    converting to 'open' cards, multiple correct answers can be separated by
    semicolons (;), slashes (/) or commas (,).
    """
    try:
        text = input_file.read_text(encoding="utf-8")
    except OSError as e:
        raise _error(f"Could not read {input_file}: {e}")

    cards = parse_import_input(import_type, reverse, text)
    if cards is None:
        console.print("Failed the conversion.")
        raise typer.Exit(code=1)

    output_file.write_text(cards_to_string(cards), encoding="utf-8")
    console.print("Successfully converted the file.")


def run_app() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run_app()
