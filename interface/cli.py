"""Play against the engine in the terminal."""

import logging

from engine.config import CONFIG
from engine.core.board import Result, format_board
from engine.core.errors import EngineError
from engine.core.utils import setup_logging
from engine.main import Engine

logger = logging.getLogger(__name__)


def _result_message(engine, status):
    if status.result is Result.WIN:
        name = "Human" if status.player == engine.human_player else "Computer"
        return f"{name} won!! ({'-'.join(str(i) for i in status.line)})"
    return "Game Tie"


def play_game(engine, input_fn=input, output_fn=print, human_first=True):
    """Play one game to the end and return its final status."""
    human_turn = human_first
    while True:
        if human_turn:
            output_fn(format_board(engine.cells, empty="."))
            output_fn("----------------------------")
            raw = input_fn(f"Enter your slot (0-8) [{engine.human_player}]: ")
            try:
                slot = int(raw.strip())
            except ValueError:
                output_fn(f"Not a slot number: {raw!r}, try again.")
                continue
            try:
                status = engine.play(slot, engine.human_player)
            except EngineError as e:
                logger.info("rejected move %s: %s", slot, e)
                output_fn(f"{e} Try again.")
                continue
        else:
            slot, score = engine.get_best_move()
            status = engine.play(slot, engine.computer_player)
            output_fn(f"Engine plays: {slot} | Score: {score}")

        if status.is_terminal:
            output_fn(format_board(engine.cells, empty="."))
            output_fn(_result_message(engine, status))
            return status
        human_turn = not human_turn


def run(input_fn=input, output_fn=print, engine=None):
    engine = engine or Engine()
    while True:
        play_game(engine, input_fn, output_fn, human_first=CONFIG.players.human_first)
        again = input_fn("Play again? [y/N]: ")
        if again.strip().lower() not in ("y", "yes"):
            return
        engine.reset()


def main():
    setup_logging(CONFIG.log_level)
    try:
        run()
    except (EOFError, KeyboardInterrupt):
        print()


if __name__ == "__main__":
    main()
