from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .game import EMPTY, Board


class Status(Enum):
    IN_PROGRESS = "in_progress"
    DRAW = "draw"
    WIN = "win"


@dataclass(frozen=True)
class Outcome:
    status: Status
    winner: Optional[int] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_terminal(self) -> bool:
        return self.status is not Status.IN_PROGRESS


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)


class Evaluator:
    """Terminal evaluation for tic-tac-toe positions.

    Scores are from the point of view of the searching player: positive is a
    win for them, negative a win for the opponent, adjusted by depth so that
    quicker wins and slower losses rank higher.
    """

    WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
        (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
        (0, 4, 8), (2, 4, 6),             # diagonals
    )

    WIN_SCORE = 10

    @classmethod
    def outcome(cls, board: Board) -> Outcome:
        cells = board.cells
        for line in cls.WIN_LINES:
            a, b, c = line
            if cells[a] != EMPTY and cells[a] == cells[b] == cells[c]:
                return Outcome(Status.WIN, winner=cells[a], line=line)
        if EMPTY in cells:
            return IN_PROGRESS
        return DRAW

    @classmethod
    def score(cls, outcome: Outcome, player: int, opponent: int, depth: int) -> int:
        if outcome.winner == player:
            return cls.WIN_SCORE - depth
        if outcome.winner == opponent:
            return depth - cls.WIN_SCORE
        return 0
