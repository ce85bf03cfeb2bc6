from typing import List, Optional, Tuple

from engine.config import CONFIG
from engine.core.board import Board, GameStatus
from engine.core.errors import InvalidPlayerError
from engine.core.search import SearchEngine

class Engine:
    def __init__(self, human: Optional[str] = None, computer: Optional[str] = None,
                 alpha_beta: Optional[bool] = None):
        self.human_player = human or CONFIG.players.human
        self.computer_player = computer or CONFIG.players.computer
        self.board = Board()
        self.search = SearchEngine((self.computer_player, self.human_player), alpha_beta=alpha_beta)

    @property
    def is_terminal(self) -> bool:
        return self.board.is_terminal

    @property
    def cells(self) -> List[str]:
        return self.board.cells

    def available_slots(self) -> List[int]:
        return self.board.available_slots()

    def get_best_move(self, player: Optional[str] = None) -> Tuple[Optional[int], int]:
        return self.search.search_best_move(self.board.cells, player or self.computer_player)

    def play(self, slot: int, player: str) -> GameStatus:
        if player not in (self.human_player, self.computer_player):
            raise InvalidPlayerError(player)
        return self.board.play(slot, player)

    def play_human_turn(self, slot: int) -> Tuple[GameStatus, Optional[int], Optional[GameStatus]]:
        """Play the human move and, unless that ended the game, the computer's reply."""
        status = self.play(slot, self.human_player)
        if status.is_terminal:
            return status, None, None
        reply, _score = self.get_best_move()
        return status, reply, self.play(reply, self.computer_player)

    def reset(self):
        self.board.reset()

    def print_board(self):
        self.board.display()
