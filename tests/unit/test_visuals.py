"""
Unit tests for the shared rich panels.
"""

import io

from rich.console import Console
from rich.text import Text

from cardstack.delivery import visuals as ui
from cardstack.session import Chunk, Parameters


def _render(renderable) -> str:
    console = Console(file=io.StringIO(), force_terminal=False, width=100)
    console.print(renderable)
    return console.file.getvalue()


class TestResultPanel:

    def test_plain_answer_shown_verbatim(self):
        output = _render(ui.result_panel(True, "[not markup]"))
        assert "◉ CORRECT" in output
        assert "[not markup]" in output

    def test_markup_answer_is_rendered(self):
        answer = Text.from_markup("The \\[cell] is the [bold]mitochondria[/bold].")
        output = _render(ui.result_panel(False, answer))

        assert "✗ INCORRECT" in output
        assert "The [cell] is the mitochondria." in output
        assert "[bold]" not in output
        assert "\\[" not in output


class TestParametersPanel:

    def test_lists_options(self):
        params = Parameters(shuffle=True, subset=3, chunk=Chunk(2, 4), review_mode=False)
        output = _render(ui.parameters_panel("deck.txt", 12, params))

        assert "deck.txt" in output
        assert "12" in output
        assert "2/4" in output
        assert "off" in output

    def test_no_subset_reads_all(self):
        output = _render(ui.parameters_panel("deck.txt", 4, Parameters()))
        assert "all" in output
