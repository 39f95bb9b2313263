"""Run with ``python -m cardstack``."""

from cardstack.cli.main import run_app

run_app()
