"""
Session state: the root aggregate threaded through the interactive session.

Owns the random source, the navigation stack, the session parameters, the
review tracker (review mode only) and the per-screen snapshots that let a
screen resume where it left off after the user navigates back to it.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Protocol, TypeVar

from loguru import logger

from .errors import NavigationError
from .navigation import NavigationStack
from .parameters import Parameters
from .random_source import RandomSource
from .review import ReviewTracker
from .transform import DeckTransformer

T = TypeVar("T")


class StateKey(str, Enum):
    """Identifies a kind of screen; snapshots are stored per kind."""

    MAIN_MENU = "main_menu"
    RECENT_FILES = "recent_files"
    PARAMETERS = "parameters"
    CARDS = "cards"
    FINISHED = "finished"
    INFO = "info"


class Screen(Protocol):
    """What the session needs from a screen. Rendering is the interface's business."""

    key: StateKey

    def snapshot(self) -> Any | None:
        """Data to remember while another screen is on top, or None."""
        ...

    def restore(self, snapshot: Any) -> None:
        """Resume from a snapshot taken earlier by a screen of the same kind."""
        ...


class SessionState:
    """
    Central state for one process invocation.

    Only this object mutates the navigation stack, the tracker and the
    random source, one interface event at a time.
    """

    def __init__(
        self,
        rng: RandomSource,
        parameters: Parameters | None = None,
    ):
        self.rng = rng
        self.parameters = parameters or Parameters()
        self.states: dict[StateKey, Any] = {}
        self.stack: NavigationStack[Screen] = NavigationStack()
        self.tracker: ReviewTracker | None = None
        self.cards: list[Any] | None = None

    # ------------------------------------------------------------------
    # Cards
    # ------------------------------------------------------------------

    def prepare_cards(self, deck: Sequence[T], parameters: Parameters | None = None) -> list[T]:
        """
        Derive the session's card sequence from a parsed deck.

        Validates the parameters against the deck, runs the transform once
        and, in review mode, starts a tracker sized to the result. The
        result may be empty, which is distinct from no deck at all.

        Args:
            deck: Parsed cards in file order
            parameters: Options confirmed for this deck; the session's
                current parameters when omitted
        """
        self.parameters = (parameters or self.parameters).validate_for(len(deck))
        cards = DeckTransformer(self.rng)(deck, self.parameters)
        self.cards = cards
        self.tracker = ReviewTracker(len(cards)) if self.parameters.review_mode else None
        return cards

    def start_retry(self) -> list[Any]:
        """Narrow the session to the incorrectly answered cards for another pass."""
        if self.tracker is None or self.cards is None:
            raise NavigationError("Retrying needs a review mode session with cards")
        retry = self.tracker.retry_sequence(self.cards)
        logger.info("Retrying {} incorrect cards", len(retry))
        self.cards = retry
        self.tracker = ReviewTracker(len(retry))
        return retry

    def record_answer(self, position: int, correct: bool) -> None:
        """Forward a verdict to the tracker; nothing to do outside review mode."""
        if self.tracker is not None:
            self.tracker.record(position, correct)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def current(self) -> Screen | None:
        return self.stack.peek()

    def can_go_back(self) -> bool:
        return self.stack.can_go_back()

    def go_to_state(self, screen: Screen) -> SessionState:
        """Push ``screen``, remembering the outgoing screen's snapshot."""
        outgoing = self.stack.peek()
        if outgoing is not None:
            snapshot = outgoing.snapshot()
            if snapshot is not None:
                self.states[outgoing.key] = snapshot
        self.stack.push(screen)
        logger.debug("Navigated to {} (depth {})", screen.key.value, len(self.stack))
        return self

    def move_to_state(self, screen: Screen) -> SessionState:
        """Replace the current screen without growing history."""
        self.stack.replace_top(screen)
        logger.debug("Moved to {} (depth {})", screen.key.value, len(self.stack))
        return self

    def go_back(self) -> Screen:
        """
        Pop the current screen and return the one underneath, restored.

        Raises:
            NavigationError: only the root screen is left
        """
        if not self.stack.can_go_back():
            raise NavigationError("Cannot go back from the root screen")
        popped = self.stack.pop()
        exposed = self.stack.peek()
        if exposed is None:
            raise NavigationError("No screen left after going back")
        snapshot = self.states.get(exposed.key)
        if snapshot is not None:
            exposed.restore(snapshot)
        logger.debug("Back from {} to {}", popped.key.value, exposed.key.value)
        return exposed

    def terminate(self) -> None:
        """End the session; the only way the root screen leaves the stack."""
        self.stack.clear()
        logger.debug("Session terminated")

    def snapshot_for(self, key: StateKey, kind: type[T]) -> T | None:
        """Typed read of the snapshot stored for ``key``."""
        snapshot = self.states.get(key)
        if snapshot is None:
            return None
        if not isinstance(snapshot, kind):
            raise TypeError(
                f"Snapshot for {key.value} is {type(snapshot).__name__}, not {kind.__name__}"
            )
        return snapshot
