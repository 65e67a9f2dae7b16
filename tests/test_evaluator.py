from __future__ import annotations

import itertools

import pytest

from engine.evaluator import DRAW, IN_PROGRESS, Evaluator, Outcome, Status
from engine.game import PLAYER_ONE, PLAYER_TWO, Board, other_player


@pytest.mark.parametrize("player", [PLAYER_ONE, PLAYER_TWO])
@pytest.mark.parametrize("line", Evaluator.WIN_LINES)
def test_completed_line_wins(line, player):
    cells = [0] * 9
    for i in line:
        cells[i] = player
    # two stray opponent marks can never form a second line
    others = [i for i in range(9) if i not in line][:2]
    for i in others:
        cells[i] = other_player(player)

    outcome = Evaluator.outcome(Board(cells))
    assert outcome.status is Status.WIN
    assert outcome.winner == player
    assert outcome.line == line
    assert outcome.is_terminal


def _full_board_with_single_line(line, player):
    for cells in itertools.product((PLAYER_ONE, PLAYER_TWO), repeat=9):
        won = [l for l in Evaluator.WIN_LINES if cells[l[0]] == cells[l[1]] == cells[l[2]]]
        if won == [line] and cells[line[0]] == player:
            return list(cells)
    raise AssertionError(f"no full board wins only {line}")


@pytest.mark.parametrize("player", [PLAYER_ONE, PLAYER_TWO])
@pytest.mark.parametrize("line", Evaluator.WIN_LINES)
def test_single_line_on_full_board_wins(line, player):
    board = Board(_full_board_with_single_line(line, player))
    assert board.is_full()
    outcome = Evaluator.outcome(board)
    assert outcome.status is Status.WIN
    assert outcome.winner == player
    assert outcome.line == line


def test_eight_win_lines():
    assert len(Evaluator.WIN_LINES) == 8
    assert len(set(Evaluator.WIN_LINES)) == 8


def test_full_board_without_line_is_draw():
    outcome = Evaluator.outcome(Board([1, 2, 1, 1, 2, 2, 2, 1, 1]))
    assert outcome == DRAW
    assert outcome.winner is None
    assert outcome.is_terminal


def test_win_on_full_board_beats_draw():
    outcome = Evaluator.outcome(Board([1, 1, 1, 2, 2, 1, 2, 1, 2]))
    assert outcome.status is Status.WIN
    assert outcome.winner == PLAYER_ONE


@pytest.mark.parametrize(
    "cells",
    [
        [0] * 9,
        [1, 2, 0, 0, 0, 0, 0, 0, 0],
        [1, 2, 1, 1, 2, 2, 2, 1, 0],
        [1, 1, 0, 2, 2, 0, 0, 0, 0],
    ],
)
def test_open_board_without_line_is_in_progress(cells):
    outcome = Evaluator.outcome(Board(cells))
    assert outcome == IN_PROGRESS
    assert not outcome.is_terminal


def test_score_is_depth_adjusted():
    won = Outcome(Status.WIN, winner=PLAYER_ONE)
    lost = Outcome(Status.WIN, winner=PLAYER_TWO)
    assert Evaluator.score(won, PLAYER_ONE, PLAYER_TWO, 0) == 10
    assert Evaluator.score(won, PLAYER_ONE, PLAYER_TWO, 3) == 7
    assert Evaluator.score(lost, PLAYER_ONE, PLAYER_TWO, 3) == -7
    assert Evaluator.score(lost, PLAYER_ONE, PLAYER_TWO, 8) == -2
    assert Evaluator.score(DRAW, PLAYER_ONE, PLAYER_TWO, 5) == 0
    # faster wins rank above slower ones
    assert Evaluator.score(won, PLAYER_ONE, PLAYER_TWO, 1) > Evaluator.score(won, PLAYER_ONE, PLAYER_TWO, 5)
