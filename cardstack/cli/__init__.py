"""
Command line interface.
"""

from cardstack.cli.main import app, run_app

__all__ = ["app", "run_app"]
