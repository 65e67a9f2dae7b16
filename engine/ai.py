from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .evaluator import Evaluator
from .game import Board, detect_player, other_player

logger = logging.getLogger(__name__)

NO_MOVE = -1


@dataclass
class SearchResult:
    """Root search summary.

    score is an int in [-10, 10], or -inf when the board had no empty cell
    (best_move is then -1).
    """

    best_move: int
    score: Union[int, float]
    nodes: int
    scored_moves: List[Tuple[int, int]] = field(default_factory=list)


class AIPlayer:
    """Exhaustive minimax with alpha-beta pruning.

    Holds no state between calls, so one instance can serve any number of
    requests as long as each request brings its own Board.
    """

    def choose_move(self, board: Board, player: int) -> int:
        """Return the best cell for player, or -1 if the board is full.

        Cells are scanned in increasing index order and only a strictly
        better score replaces the current choice, so ties go to the lowest
        index.
        """
        return self.analyse(board, player).best_move

    def analyse(self, board: Board, player: int) -> SearchResult:
        opponent = other_player(player)
        best_move = NO_MOVE
        best_score = -math.inf
        nodes = 0
        scored_moves: List[Tuple[int, int]] = []

        for index in board.empty_cells():
            board.push(index, player)
            try:
                score, sub_nodes = self._alphabeta(
                    board, 0, False, player, opponent, -math.inf, math.inf
                )
                nodes += sub_nodes + 1
            finally:
                board.pop()
            scored_moves.append((index, score))
            if score > best_score:
                best_score = score
                best_move = index

        logger.debug(
            "player %s: move=%s score=%s nodes=%s", player, best_move, best_score, nodes
        )
        return SearchResult(best_move=best_move, score=best_score, nodes=nodes, scored_moves=scored_moves)

    def search(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        player: int,
        opponent: int,
        alpha: float = -math.inf,
        beta: float = math.inf,
    ) -> int:
        """Minimax value of board for player; board is left unchanged."""
        score, _ = self._alphabeta(board, depth, maximizing, player, opponent, alpha, beta)
        return score

    def _alphabeta(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        player: int,
        opponent: int,
        alpha: float,
        beta: float,
    ) -> Tuple[int, int]:
        outcome = Evaluator.outcome(board)
        if outcome.is_terminal:
            return Evaluator.score(outcome, player, opponent, depth), 0

        nodes = 0

        if maximizing:
            value = -math.inf
            for index in board.empty_cells():
                board.push(index, player)
                try:
                    score, child_nodes = self._alphabeta(
                        board, depth + 1, False, player, opponent, alpha, beta
                    )
                    nodes += child_nodes + 1
                finally:
                    board.pop()
                value = max(value, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return value, nodes
        else:
            value = math.inf
            for index in board.empty_cells():
                board.push(index, opponent)
                try:
                    score, child_nodes = self._alphabeta(
                        board, depth + 1, True, player, opponent, alpha, beta
                    )
                    nodes += child_nodes + 1
                finally:
                    board.pop()
                value = min(value, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break
            return value, nodes


def best_move(board: Board, player: Optional[int] = None) -> int:
    if player is None:
        player = detect_player(board)
    return AIPlayer().choose_move(board, player)
