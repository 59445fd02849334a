"""
render.py
---------------------------------------------------
Board rendering for the terminal game.
A Renderer decides how one scored letter is drawn;
render_board lays attempts out as a boxed grid.
---------------------------------------------------
"""

import abc
from typing import Iterable

from wordle_term.wordle_core import Attempt, MatchState

RESET = "\033[0m"


class Renderer(abc.ABC):
    @abc.abstractmethod
    def paint(self, letter: str, state: MatchState) -> str:
        ...


class PlainRenderer(Renderer):
    """No escape codes, for pipes, logs and tests."""
    def paint(self, letter: str, state: MatchState) -> str:
        return letter


class AnsiRenderer(Renderer):
    """
    Yellow = present but wrong position,
    Green = correct position,
    default colour = not in word.
    """
    colors = {
        MatchState.PARTIAL_MATCH: "\033[33m",
        MatchState.EXACT_MATCH: "\033[32m",
    }

    def paint(self, letter: str, state: MatchState) -> str:
        color = self.colors.get(state)
        if color is None:
            return letter
        return f"{color}{letter}{RESET}"


def pick_renderer(color: bool) -> Renderer:
    return AnsiRenderer() if color else PlainRenderer()


def render_board(attempts: Iterable[Attempt], renderer: Renderer) -> str:
    """
    Draw every attempt as one row of boxed cells:

        -------------------------------
        |     |     |     |     |     |
        |  A  |  X  |  Y  |  B  |  Z  |
        |     |     |     |     |     |
        -------------------------------
    """
    lines = []
    for i, attempt in enumerate(attempts):
        n = len(attempt.guess)
        separator = "-" + "------" * n
        padding = "|" + "     |" * n
        text = "|" + "".join(
            f"  {renderer.paint(ch, state)}  |"
            for ch, state in zip(attempt.guess, attempt.scores)
        )
        if i == 0:
            lines.append(separator)
        lines.extend([padding, text, padding, separator])
    return "\n".join(lines)
