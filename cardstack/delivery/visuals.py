"""
Visual components for the review screens.

Colour theme plus the handful of rich panels the screens share.
"""

from __future__ import annotations

from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from cardstack.session import Parameters, ReviewSummary

# =============================================================================
# THEME
# =============================================================================

THEME = {
    "primary": "#5FD7FF",  # Sky blue - headers, borders
    "secondary": "#AF87FF",  # Lavender - menus
    "success": "#00FF88",  # Neon Green - correct answers
    "warning": "#FFD700",  # Gold - hints, retries
    "error": "#FF3366",  # Red - incorrect
    "dim": "#6C6C80",  # Grey - secondary text
    "white": "#F0F0F0",
}

STYLES = {
    "primary": Style(color=THEME["primary"], bold=True),
    "secondary": Style(color=THEME["secondary"]),
    "success": Style(color=THEME["success"], bold=True),
    "warning": Style(color=THEME["warning"], bold=True),
    "error": Style(color=THEME["error"], bold=True),
    "dim": Style(color=THEME["dim"]),
}


def menu_panel(title: str, options: list[str], selected: int) -> Panel:
    """Numbered menu; the remembered selection is highlighted."""
    content = Text()
    for i, option in enumerate(options):
        marker = "▸" if i == selected else " "
        style = STYLES["primary"] if i == selected else STYLES["secondary"]
        content.append(f"{marker} {i + 1}. {option}\n", style=style)
    return Panel(
        content,
        title=f"[bold]{title}[/bold]",
        border_style=Style(color=THEME["primary"]),
        box=box.ROUNDED,
        padding=(1, 2),
    )


def question_panel(question: str, position: int, total: int, subtitle: str = "") -> Panel:
    return Panel(
        question,
        title=f"[bold cyan]CARD {position + 1}/{total}[/bold cyan]",
        subtitle=f"[dim]{subtitle}[/dim]" if subtitle else None,
        border_style="cyan",
        box=box.HEAVY,
        padding=(1, 2),
    )


def answer_panel(answer: str) -> Panel:
    return Panel(
        answer or "[dim](no answer)[/dim]",
        title="[bold green]ANSWER[/bold green]",
        border_style="green",
        box=box.HEAVY,
        padding=(1, 2),
    )


def result_panel(passed: bool, answer: str | Text) -> Panel:
    """
    Correct/incorrect feedback with the expected answer.

    A ``str`` answer is shown verbatim; pass a ``Text`` (for example from
    ``Text.from_markup``) to keep styling inside the answer.
    """
    color = THEME["success"] if passed else THEME["error"]
    status = "CORRECT" if passed else "INCORRECT"
    icon = "◉" if passed else "✗"

    content = Text()
    content.append(f"{icon} {status}\n\n", style=Style(color=color, bold=True))
    content.append("Answer: ", style=STYLES["dim"])
    styled = Text(style=Style(color=THEME["white"], bold=True))
    styled.append_text(answer if isinstance(answer, Text) else Text(answer))
    content.append_text(styled)

    return Panel(
        content,
        border_style=Style(color=color),
        box=box.HEAVY,
        padding=(1, 2),
    )


def summary_table(summary: ReviewSummary) -> Table:
    table = Table(title="Review Results", box=box.SIMPLE_HEAVY)
    table.add_column("Outcome", style="cyan")
    table.add_column("Cards", justify="right")
    table.add_row("Correct", f"[green]{summary.correct}[/green]")
    table.add_row("Incorrect", f"[red]{summary.incorrect}[/red]")
    if summary.unseen:
        table.add_row("Unseen", f"[dim]{summary.unseen}[/dim]")
    table.add_row("Total", str(summary.total))
    return table


def info_panel(title: str, text: str) -> Panel:
    return Panel(
        text,
        title=f"[bold]{title}[/bold]",
        border_style=Style(color=THEME["secondary"]),
        box=box.ROUNDED,
        padding=(1, 2),
    )


def parameters_panel(deck_name: str, deck_size: int, params: Parameters) -> Panel:
    """Deck overview shown before the review options are confirmed."""
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan")
    table.add_column()
    table.add_row("Deck", escape(deck_name))
    table.add_row("Cards", str(deck_size))
    table.add_row("Shuffle", "yes" if params.shuffle else "no")
    table.add_row("Amount", "all" if params.subset is None else str(params.subset))
    table.add_row("Chunk", str(params.chunk))
    table.add_row("Review mode", "on" if params.review_mode else "off")
    return Panel(
        table,
        title="[bold]REVIEW OPTIONS[/bold]",
        border_style=Style(color=THEME["primary"]),
        box=box.ROUNDED,
        padding=(1, 2),
    )
