from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence

EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2

PLAYERS = (PLAYER_ONE, PLAYER_TWO)
CELL_VALUES = (EMPTY, PLAYER_ONE, PLAYER_TWO)
BOARD_SIZE = 9

SYMBOLS = {EMPTY: " ", PLAYER_ONE: "X", PLAYER_TWO: "O"}


class InvalidBoardError(ValueError):
    pass


class IllegalMoveError(ValueError):
    pass


def other_player(player: int) -> int:
    if player == PLAYER_ONE:
        return PLAYER_TWO
    if player == PLAYER_TWO:
        return PLAYER_ONE
    raise ValueError(f"Unknown player: {player!r}")


def _cell_value(index: int, value: object) -> int:
    # bool is an int subclass; true/false are not cell values
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidBoardError(f"Invalid value at cell {index}: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidBoardError(f"Invalid value at cell {index}: {value!r}")
    if value not in CELL_VALUES:
        raise InvalidBoardError(f"Invalid value at cell {index}: {value!r}")
    return int(value)


class Board:
    """Mutable 3x3 board, row-major cells indexed 0..8.

    Marks are placed with push() and taken back with pop(), mirroring how a
    move stack works: the search pushes a trial mark, recurses and pops it
    again so the board is unchanged once the call returns.
    """

    def __init__(self, cells: Iterable[int] | None = None) -> None:
        self.cells: List[int] = list(cells) if cells is not None else [EMPTY] * BOARD_SIZE
        self.move_stack: List[int] = []

    @classmethod
    def from_values(cls, values: object) -> "Board":
        """Build a board from untrusted input (query string or JSON body)."""
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise InvalidBoardError("Board must be a list of 9 cells")
        if len(values) != BOARD_SIZE:
            raise InvalidBoardError(f"Board must have 9 cells, got {len(values)}")
        return cls(_cell_value(i, value) for i, value in enumerate(values))

    def push(self, index: int, player: int) -> None:
        if player not in PLAYERS:
            raise IllegalMoveError(f"Unknown player: {player!r}")
        if not 0 <= index < BOARD_SIZE:
            raise IllegalMoveError(f"Cell out of range: {index}")
        if self.cells[index] != EMPTY:
            raise IllegalMoveError(f"Cell {index} is already taken")
        self.cells[index] = player
        self.move_stack.append(index)

    def pop(self) -> int:
        index = self.move_stack.pop()
        self.cells[index] = EMPTY
        return index

    def empty_cells(self) -> List[int]:
        return [i for i, cell in enumerate(self.cells) if cell == EMPTY]

    def is_full(self) -> bool:
        return EMPTY not in self.cells

    def count(self, player: int) -> int:
        return self.cells.count(player)

    def copy(self) -> "Board":
        clone = Board(self.cells)
        clone.move_stack = list(self.move_stack)
        return clone

    def to_list(self) -> List[int]:
        return list(self.cells)

    def render(self) -> str:
        symbols = [SYMBOLS[cell] for cell in self.cells]
        rows = [" " + " | ".join(symbols[i:i + 3]) + " " for i in range(0, BOARD_SIZE, 3)]
        return "\n---+---+---\n".join(rows)

    def __getitem__(self, index: int) -> int:
        return self.cells[index]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[int]:
        return iter(self.cells)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Board):
            return self.cells == other.cells
        if isinstance(other, list):
            return self.cells == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Board({self.cells!r})"


def detect_player(board: Board) -> int:
    """Whose turn it is, assuming alternating play with player one opening.

    Boards that cannot arise from alternating play are not rejected; see
    is_reachable() for the strict check.
    """
    return PLAYER_ONE if board.count(PLAYER_ONE) <= board.count(PLAYER_TWO) else PLAYER_TWO


def is_reachable(board: Board) -> bool:
    return board.count(PLAYER_ONE) - board.count(PLAYER_TWO) in (0, 1)
