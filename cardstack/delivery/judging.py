"""
Answer judging for the review screens.

Pure functions: the screens collect input, these decide right or wrong,
and the session tracker records the verdict.
"""

from __future__ import annotations

from rich.markup import escape

from cardstack.cards import Gap, OpenQuestion

YES_INPUTS = {"y", "yes"}
NO_INPUTS = {"n", "no"}
DONT_KNOW_INPUTS = {"?", "idk", "dk", "don't know", "dont know"}


def judge_definition(response: str) -> bool | None:
    """Self-evaluation for a definition card. None means "ask again"."""
    response = response.strip().lower()
    if response in YES_INPUTS:
        return True
    if response in NO_INPUTS or response in DONT_KNOW_INPUTS:
        return False
    return None


def judge_open_answer(gap: Gap, answer: str, case_sensitive: bool = True) -> bool:
    """True if ``answer`` matches any accepted answer for the gap."""
    answer = answer.strip()
    if case_sensitive:
        return answer in gap.answers
    return answer.casefold() in {a.casefold() for a in gap.answers}


def judge_open_question(
    card: OpenQuestion,
    answers: list[str],
    case_sensitive: bool = True,
) -> bool:
    """An open question is correct only when every gap is."""
    if len(answers) != len(card.gaps):
        raise ValueError(f"Expected {len(card.gaps)} answers, got {len(answers)}")
    return all(
        judge_open_answer(gap, answer, case_sensitive)
        for gap, answer in zip(card.gaps, answers)
    )


def render_open_question(card: OpenQuestion, reveal: bool = False) -> str:
    """Question text with numbered blanks, or with the first accepted answers filled in."""
    text = escape(card.segments[0])
    for number, (gap, segment) in enumerate(zip(card.gaps, card.segments[1:]), start=1):
        text += f"[bold]{escape(gap.answers[0])}[/bold]" if reveal else f"[cyan]____({number})[/cyan]"
        text += escape(segment)
    return text
