"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from cardstack.cards import Definition, parse_cards  # noqa: E402
from cardstack.config import get_settings  # noqa: E402
from cardstack.session import RandomSource  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def rng():
    """Deterministic random source."""
    return RandomSource(seed=1234)


@pytest.fixture
def ten_cards():
    """Ten definition cards, Q0..Q9, in deck order."""
    return [Definition(title=f"Q{i}", definition=f"A{i}") for i in range(10)]


@pytest.fixture
def sample_deck_text():
    """A small deck with one card of each kind."""
    return (
        "# What is the capital of France?\n"
        "Paris\n"
        "---\n"
        "# Fill in the blank\n"
        "The powerhouse of the cell is the _mitochondria|mitochondrion_.\n"
        "---\n"
        "# Two blanks\n"
        "_TCP_ is reliable, _UDP_ is not.\n"
    )


@pytest.fixture
def sample_cards(sample_deck_text):
    return parse_cards(sample_deck_text)


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Point settings at a temporary data dir and reset the settings cache."""
    monkeypatch.setenv("CARDSTACK_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("CARDSTACK_USE_ESCAPE_CODE", "false")
    monkeypatch.delenv("CARDSTACK_SEED", raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
