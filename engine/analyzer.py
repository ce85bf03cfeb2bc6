# engine/analyzer.py
from typing import Any, Dict, List, Optional

from engine.core.board import Board, Result, classify
from engine.core.errors import InvalidStateError

# Labels by score lost against the best move, in search-score units.
# Outcomes are 10 apart (win 10, tie 0, loss -10).
TH_BEST = 0       # nothing lost
TH_MISTAKE = 10   # win -> tie, or tie -> loss
# > TH_MISTAKE => "Blunder" (win -> loss)

class Analyzer:
    def __init__(self, search_engine):
        self.search_engine = search_engine

    def classify_move(self, cells: List[str], slot: int, player: str) -> Dict[str, Any]:
        """
        Classify a single move.
        - cells: board BEFORE the move (unchanged by this function).
        - slot: the slot the player chose.
        - player: the player making the move.
        Returns a dict with label, scores and the engine's best slot.
        """
        if classify(cells).is_terminal:
            raise InvalidStateError("Game over! Nothing left to analyze")
        best_slot, best_score = self.search_engine.search_best_move(cells, player)
        move_score = self.search_engine.score_move(cells, slot, player)
        loss = best_score - move_score

        after = list(cells)
        after[slot] = player
        completes_line = classify(after).result is Result.WIN

        if completes_line:
            label = "Winning move"
        elif loss <= TH_BEST:
            label = "Best move"
        elif loss <= TH_MISTAKE:
            label = "Mistake"
        else:
            label = "Blunder"

        return {
            "slot": slot,
            "player": player,
            "best_slot": best_slot,
            "best_score": best_score,
            "move_score": move_score,
            "loss": loss,
            "label": label,
        }

    def analyze_game(self, moves: List[int], first_player: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Analyze a list of slots played alternately from an empty board.
        Illegal moves raise the board's own errors.
        """
        board = Board()
        player = first_player or self.search_engine.players[0]
        report = []
        for slot in moves:
            before = board.cells
            board.play(slot, player)
            report.append(self.classify_move(before, slot, player))
            player = self.search_engine.opponent(player)
        return report
