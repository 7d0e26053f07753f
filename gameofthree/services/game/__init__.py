"""Game domain services: seats, sessions, move rules and turn timers.

This package holds the game mechanics imported by the socket handlers and
HTTP routes, keeping transport concerns separated from the rules. Nothing in
``seats``, ``engine`` or ``session`` performs I/O.
"""

from .engine import Continue, MoveOutcome, Win, apply_move, compute_new_number, parse_operator, random_in_range
from .seats import SeatAllocator
from .session import Departure, Forfeit, Seating, SessionManager, join_session, start_session

__all__ = [
    'Continue',
    'Departure',
    'Forfeit',
    'MoveOutcome',
    'SeatAllocator',
    'Seating',
    'SessionManager',
    'Win',
    'apply_move',
    'compute_new_number',
    'join_session',
    'parse_operator',
    'random_in_range',
    'start_session',
]
