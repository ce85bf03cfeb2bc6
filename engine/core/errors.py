"""Exceptions raised by the board and surfaced to the interfaces."""


class EngineError(Exception):
    """Base class for engine errors."""


class InvalidStateError(EngineError):
    """A move was attempted after the game reached a terminal status."""


class InvalidMoveError(EngineError):
    def __init__(self, slot):
        super().__init__(f"{slot} is not a valid slot.")
        self.slot = slot


class InvalidPlayerError(EngineError):
    def __init__(self, player):
        super().__init__(f"{player!r} is not a player of this game.")
        self.player = player
