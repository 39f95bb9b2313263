"""
Interactive loop: render the top screen, let it handle one round of
input, repeat until the stack is empty.
"""

from __future__ import annotations

from typing import cast

from loguru import logger

from cardstack.session import SessionState, StructuralError

from .screens import InteractiveScreen, ScreenContext


def _reset_to_root(session: SessionState) -> None:
    root = next(iter(session.stack), None)
    session.terminate()
    if root is not None:
        session.go_to_state(root)


def run_session(session: SessionState, ctx: ScreenContext) -> None:
    """Drive the session until the user quits."""
    while session.current is not None:
        screen = cast(InteractiveScreen, session.current)
        try:
            screen.step(session, ctx)
        except StructuralError:
            logger.exception("Navigation bug on the {} screen, returning to start", screen.key.value)
            _reset_to_root(session)
        except (KeyboardInterrupt, EOFError):
            ctx.console.print()
            session.terminate()
