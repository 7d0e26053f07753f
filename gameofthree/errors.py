"""Errors raised by the seat allocator, the session manager and the turn engine.

Every error is terminal to the request that triggered it only. Socket
handlers turn them into an ``error`` event for the originating connection.
"""


class GameError(Exception):
    code = 'game_error'

    def __init__(self, message: str = ''):
        super().__init__(message or self.__class__.__doc__ or self.code)
        self.message = message or (self.__class__.__doc__ or self.code)

    def to_dict(self):
        return {'code': self.code, 'message': self.message}


class SeatUnavailable(GameError):
    """Please wait, game already running"""
    code = 'seat_unavailable'


class OutOfTurnMove(GameError):
    """Wait, other Player is moving"""
    code = 'out_of_turn'


class InvalidOperator(GameError):
    """Operator must be a whole number"""
    code = 'invalid_operator'


class GameNotActive(GameError):
    """Waiting for other player join..."""
    code = 'game_not_active'


class GameAlreadyWon(GameError):
    """Game is over"""
    code = 'game_over'


class SessionStateError(GameError):
    """Session is not in a state that allows this transition"""
    code = 'session_state'
