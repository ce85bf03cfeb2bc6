"""3x3 board state: move validation, outcome classification, slot enumeration.

Cells are stored in a flat list of 9 strings in row-major order
(row r, col c -> index 3r+c). An empty cell is "", any other string is the
mark of the player occupying it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from engine.core.errors import InvalidMoveError, InvalidPlayerError, InvalidStateError

logger = logging.getLogger(__name__)

EMPTY = ""
SIZE = 9

# Checked in this order; the first complete line is the one reported
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


class Result(Enum):
    WIN = 1
    TIE = 0
    CONTINUE = -1


@dataclass(frozen=True)
class GameStatus:
    result: Result
    player: Optional[str] = None
    line: Optional[Tuple[int, int, int]] = None
    slots: Tuple[int, ...] = ()

    @property
    def is_terminal(self) -> bool:
        return self.result is not Result.CONTINUE


def empty_cells() -> List[str]:
    return [EMPTY] * SIZE


def available_slots(cells: List[str]) -> List[int]:
    """Indices of the empty cells, ascending."""
    return [i for i, cell in enumerate(cells) if cell == EMPTY]


def classify(cells: List[str]) -> GameStatus:
    """Classify a board as won, tied or still in progress.

    Never mutates ``cells``. A board with several complete lines (not
    reachable through legal play) reports the first one in WIN_LINES order.
    """
    for line in WIN_LINES:
        a, b, c = line
        if cells[a] != EMPTY and cells[a] == cells[b] == cells[c]:
            return GameStatus(Result.WIN, player=cells[a], line=line)

    slots = available_slots(cells)
    if not slots:
        return GameStatus(Result.TIE)
    return GameStatus(Result.CONTINUE, slots=tuple(slots))


def format_board(cells: List[str], empty: str = " ") -> str:
    """Render the board as three ``|a,b,c|`` rows."""
    rows = []
    for i in range(0, SIZE, 3):
        rows.append("|" + ",".join(cell or empty for cell in cells[i:i + 3]) + "|")
    return "\n".join(rows)


class Board:
    def __init__(self):
        """Start from an empty board."""
        self._cells = empty_cells()
        self._game_over = False

    @property
    def cells(self) -> List[str]:
        """A copy of the cells; the owned board only changes through play()."""
        return list(self._cells)

    @property
    def is_terminal(self) -> bool:
        return self._game_over

    def reset(self):
        """Clear every cell and the terminal flag."""
        self._cells = empty_cells()
        self._game_over = False

    def available_slots(self, cells: Optional[List[str]] = None) -> List[int]:
        return available_slots(self._cells if cells is None else cells)

    def classify(self, cells: Optional[List[str]] = None) -> GameStatus:
        return classify(self._cells if cells is None else cells)

    def is_valid_slot(self, slot) -> bool:
        """True if ``slot`` is an index in range whose cell is empty."""
        if isinstance(slot, bool) or not isinstance(slot, int):
            return False
        return 0 <= slot < SIZE and self._cells[slot] == EMPTY

    def play(self, slot: int, player: str) -> GameStatus:
        """Mark ``slot`` for ``player`` and return the resulting status."""
        if self._game_over:
            raise InvalidStateError("Game over! Please reset the board")
        if not isinstance(player, str) or player == EMPTY:
            raise InvalidPlayerError(player)
        if not self.is_valid_slot(slot):
            raise InvalidMoveError(slot)

        self._cells[slot] = player
        status = classify(self._cells)
        if status.is_terminal:
            self._game_over = True
        logger.debug("%s played %d -> %s", player, slot, status.result.name)
        return status

    def display(self):
        """Print ASCII representation."""
        print(format_board(self._cells))
