"""
Session core: everything between a parsed deck and the review screens.

Components:
- parameters: Chunk and Parameters, validated on construction
- chunking: contiguous near-equal partitions of a deck
- transform: shuffle -> chunk -> subset pipeline
- review: per-card outcome ledger
- navigation: generic back-stack of screens
- state: SessionState, the aggregate that owns all of the above
"""

from cardstack.session.chunking import chunk_bounds, chunk_range, split_into_chunks
from cardstack.session.errors import (
    ConfigurationError,
    EmptyStackError,
    InvalidChunk,
    InvalidSubset,
    NavigationError,
    OutcomePositionError,
    SessionError,
    StructuralError,
)
from cardstack.session.navigation import NavigationStack
from cardstack.session.parameters import Chunk, Parameters
from cardstack.session.random_source import RandomSource
from cardstack.session.review import ReviewOutcome, ReviewSummary, ReviewTracker
from cardstack.session.state import Screen, SessionState, StateKey
from cardstack.session.transform import DeckTransformer, transform

__all__ = [
    # Parameters
    "Chunk",
    "Parameters",
    # Deck
    "chunk_bounds",
    "chunk_range",
    "split_into_chunks",
    "DeckTransformer",
    "transform",
    "RandomSource",
    # Review
    "ReviewOutcome",
    "ReviewSummary",
    "ReviewTracker",
    # Navigation
    "NavigationStack",
    "Screen",
    "SessionState",
    "StateKey",
    # Errors
    "SessionError",
    "ConfigurationError",
    "InvalidChunk",
    "InvalidSubset",
    "StructuralError",
    "EmptyStackError",
    "NavigationError",
    "OutcomePositionError",
]
