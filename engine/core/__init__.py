"""Core engine components: board state, errors, and minimax search."""

from .board import Board, GameStatus, Result, classify, available_slots
from .errors import EngineError, InvalidMoveError, InvalidPlayerError, InvalidStateError
from .search import SearchEngine
