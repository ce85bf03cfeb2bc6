import logging
import time
from typing import List, Optional, Sequence, Tuple

from engine.config import CONFIG
from engine.core.board import EMPTY, Result, classify
from engine.core.errors import InvalidMoveError
from engine.core.utils import log_search_info

logger = logging.getLogger(__name__)


class SearchEngine:
    def __init__(self, players: Optional[Sequence[str]] = None, alpha_beta: Optional[bool] = None):
        """
        players: the two player tokens; defaults to (computer, human) from CONFIG.
        alpha_beta: prune with alpha-beta (default from CONFIG). Disabling it
        yields plain minimax, which picks the same moves but visits more nodes.

        Scores are absolute: win_score for a win of the maximizing player,
        lose_score for a loss, tie_score for a tie, whatever the depth. A win
        in one move scores the same as a win in five.
        """
        if players is None:
            players = (CONFIG.players.computer, CONFIG.players.human)
        players = tuple(players)
        if len(players) != 2 or players[0] == players[1]:
            raise ValueError(f"expected two distinct players, got {players!r}")
        self.players = players

        cfg = CONFIG.search
        cfg.validate()
        self.alpha_beta = cfg.alpha_beta if alpha_beta is None else alpha_beta
        self.min_score = cfg.min_score
        self.max_score = cfg.max_score
        self.win_score = cfg.win_score
        self.tie_score = cfg.tie_score
        self.lose_score = cfg.lose_score
        self.nodes = 0

    def opponent(self, player: str) -> str:
        if player == self.players[0]:
            return self.players[1]
        if player == self.players[1]:
            return self.players[0]
        raise ValueError(f"unknown player {player!r}")

    # Public API
    def find_best_move(self, cells: List[str], maximizing_player: str) -> Optional[int]:
        """Slot ``maximizing_player`` should play next, or None on a finished board."""
        slot, _score = self.search_best_move(cells, maximizing_player)
        return slot

    def search_best_move(self, cells: List[str], maximizing_player: str) -> Tuple[Optional[int], int]:
        """
        Returns (best_slot, score). The search runs on a private copy of
        ``cells``, so the caller's board is left untouched.
        """
        self.opponent(maximizing_player)
        self.nodes = 0
        search_cells = list(cells)
        start_time = time.time()

        slot, score = self._minimax(search_cells, maximizing_player, maximizing_player,
                                    self.min_score, self.max_score)

        elapsed = time.time() - start_time
        log_search_info(logger, maximizing_player, slot, score, self.nodes, elapsed)
        return slot, score

    def score_move(self, cells: List[str], slot: int, player: str) -> int:
        """Minimax value of ``player`` taking ``slot``, from ``player``'s point of view."""
        if not (0 <= slot < len(cells)) or cells[slot] != EMPTY:
            raise InvalidMoveError(slot)
        self.nodes = 0
        search_cells = list(cells)
        search_cells[slot] = player
        _, score = self._minimax(search_cells, self.opponent(player), player,
                                 self.min_score, self.max_score)
        return score

    # -------------------------
    # Core minimax (alpha-beta)
    # -------------------------
    def _minimax(self, cells: List[str], player: str, maximizer: str,
                 alpha: int, beta: int) -> Tuple[Optional[int], int]:
        """
        cells is a shared buffer: every mark placed here is removed again
        before returning, so the caller sees it unchanged.
        """
        self.nodes += 1

        status = classify(cells)
        if status.result is Result.WIN:
            return None, self.win_score if status.player == maximizer else self.lose_score
        if status.result is Result.TIE:
            return None, self.tie_score

        maximizing = player == maximizer
        best_slot = None
        best_score = self.min_score if maximizing else self.max_score
        opponent = self.opponent(player)

        # ascending order plus strict comparisons: ties go to the lowest slot
        for slot in status.slots:
            cells[slot] = player
            _, score = self._minimax(cells, opponent, maximizer, alpha, beta)
            cells[slot] = EMPTY

            if maximizing:
                if score > best_score:
                    best_score = score
                    best_slot = slot
                alpha = max(alpha, best_score)
            else:
                if score < best_score:
                    best_score = score
                    best_slot = slot
                beta = min(beta, best_score)

            if self.alpha_beta and beta <= alpha:
                break

        return best_slot, best_score
