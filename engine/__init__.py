"""Tic-tac-toe engine package: board model, terminal evaluation and AI search.

Modules:
- game: Board with push/pop move stack, player constants and turn detection
- evaluator: Win-line scan and depth-adjusted terminal scores
- ai: Minimax with alpha-beta pruning and root move selection
"""

from .game import Board, detect_player, other_player, EMPTY, PLAYER_ONE, PLAYER_TWO
from .ai import AIPlayer, SearchResult, best_move
from .evaluator import Evaluator, Outcome, Status

__all__ = [
    "Board",
    "detect_player",
    "other_player",
    "EMPTY",
    "PLAYER_ONE",
    "PLAYER_TWO",
    "AIPlayer",
    "SearchResult",
    "best_move",
    "Evaluator",
    "Outcome",
    "Status",
]
