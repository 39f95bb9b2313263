"""
Unit tests for the review screens, driven with scripted keyboard input.
"""

import io

import pytest
from rich.console import Console

from cardstack.cards import Definition, Gap, OpenQuestion, RecentFiles
from cardstack.config import Settings
from cardstack.delivery import (
    CardsScreen,
    FinishedScreen,
    InfoScreen,
    MainMenuScreen,
    ParametersScreen,
    ScreenContext,
)
from cardstack.session import Chunk, Parameters, RandomSource, ReviewOutcome, SessionState


@pytest.fixture
def keys(monkeypatch):
    """Lines returned, in order, to every prompt."""
    queue = []
    monkeypatch.setattr("builtins.input", lambda *args: queue.pop(0))
    return queue


@pytest.fixture
def ctx(tmp_path):
    return ScreenContext(
        console=Console(file=io.StringIO(), force_terminal=False, width=100),
        settings=Settings(_env_file=None, data_dir=tmp_path),
        recents=RecentFiles(tmp_path / "recents.json"),
    )


@pytest.fixture
def session():
    session = SessionState(RandomSource(seed=7))
    session.go_to_state(MainMenuScreen())
    return session


@pytest.fixture
def mitochondria():
    return OpenQuestion(
        "Fill in",
        segments=("The [cell] is the ", "."),
        gaps=(Gap(("mitochondria", "mitochondrion")),),
    )


def _output(ctx):
    return ctx.console.file.getvalue()


class TestParametersScreen:

    def _open(self, session, tmp_path, deck):
        screen = ParametersScreen(tmp_path / "deck.txt", deck)
        session.go_to_state(screen)
        return screen

    def test_defaults_start_the_deck(self, session, ctx, keys, tmp_path, ten_cards):
        self._open(session, tmp_path, ten_cards)
        keys.extend(["", "", "", "", ""])

        session.current.step(session, ctx)

        assert isinstance(session.current, CardsScreen)
        assert session.cards == ten_cards
        assert session.parameters.validated is True
        assert session.tracker is not None

    def test_chosen_options_applied(self, session, ctx, keys, tmp_path, ten_cards):
        self._open(session, tmp_path, ten_cards)
        # no shuffle, first card only, second half, no review mode
        keys.extend(["", "n", "1", "2/2", "n"])

        session.current.step(session, ctx)

        assert session.cards == [ten_cards[5]]
        assert session.parameters.chunk == Chunk(2, 2)
        assert session.parameters.subset == 1
        assert session.tracker is None

    def test_replaces_itself_with_the_first_card(self, session, ctx, keys, tmp_path, ten_cards):
        self._open(session, tmp_path, ten_cards)
        keys.extend(["", "", "", "", ""])

        session.current.step(session, ctx)

        assert len(session.stack) == 2
        assert isinstance(session.go_back(), CardsScreen)
        assert isinstance(session.current, MainMenuScreen)

    def test_invalid_chunk_is_reported_and_screen_stays(self, session, ctx, keys, tmp_path, ten_cards):
        screen = self._open(session, tmp_path, ten_cards)
        keys.extend(["", "", "", "0/2", ""])

        screen.step(session, ctx)

        assert session.current is screen
        assert session.cards is None
        assert "between 1 and 2" in _output(ctx)

    def test_non_numeric_amount_is_reported(self, session, ctx, keys, tmp_path, ten_cards):
        screen = self._open(session, tmp_path, ten_cards)
        keys.extend(["", "", "some", "", ""])

        screen.step(session, ctx)

        assert session.current is screen
        assert "Amount must be a whole number" in _output(ctx)

    def test_zero_amount_is_reported(self, session, ctx, keys, tmp_path, ten_cards):
        screen = self._open(session, tmp_path, ten_cards)
        keys.extend(["", "", "0", "", ""])

        screen.step(session, ctx)

        assert session.current is screen
        assert session.cards is None

    def test_q_goes_back(self, session, ctx, keys, tmp_path, ten_cards):
        self._open(session, tmp_path, ten_cards)
        keys.append("q")

        session.current.step(session, ctx)

        assert isinstance(session.current, MainMenuScreen)
        assert session.cards is None

    def test_empty_chunk_shows_notice(self, session, ctx, keys, tmp_path, ten_cards):
        self._open(session, tmp_path, ten_cards[:2])
        keys.extend(["", "", "", "3/3", ""])

        session.current.step(session, ctx)

        assert isinstance(session.current, InfoScreen)
        assert session.cards == []

    def test_defaults_come_from_session_parameters(self, ctx, keys, tmp_path, ten_cards):
        session = SessionState(RandomSource(seed=7), Parameters(subset=2, review_mode=False))
        session.go_to_state(MainMenuScreen())
        self._open(session, tmp_path, ten_cards)
        keys.extend(["", "", "", "", ""])

        session.current.step(session, ctx)

        assert session.cards == ten_cards[:2]
        assert session.tracker is None


class TestCardsScreenOpenQuestion:

    def _start(self, session, cards):
        session.prepare_cards(cards)
        session.move_to_state(CardsScreen())

    def test_correct_alternative_recorded(self, session, ctx, keys, mitochondria):
        self._start(session, [mitochondria])
        keys.extend(["", "mitochondrion"])

        session.current.step(session, ctx)

        assert session.tracker.outcome(0) is ReviewOutcome.CORRECT
        assert isinstance(session.current, FinishedScreen)
        assert "◉ CORRECT" in _output(ctx)

    def test_wrong_answer_recorded(self, session, ctx, keys, mitochondria):
        self._start(session, [mitochondria])
        keys.extend(["", "ribosome"])

        session.current.step(session, ctx)

        assert session.tracker.outcome(0) is ReviewOutcome.INCORRECT
        assert "✗ INCORRECT" in _output(ctx)

    def test_revealed_answer_renders_without_markup(self, session, ctx, keys, mitochondria):
        self._start(session, [mitochondria])
        keys.extend(["", "mitochondria"])

        session.current.step(session, ctx)

        output = _output(ctx)
        assert "The [cell] is the mitochondria." in output
        assert "[bold]" not in output
        assert "\\[" not in output

    def test_advances_to_next_card(self, session, ctx, keys, mitochondria):
        self._start(session, [mitochondria, Definition("Capital of France?", "Paris")])
        keys.extend(["", "mitochondria"])

        session.current.step(session, ctx)

        assert isinstance(session.current, CardsScreen)
        assert session.current.index == 1
