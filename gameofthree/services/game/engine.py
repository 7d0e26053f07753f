import math
import random
import re
from dataclasses import dataclass, field
from typing import Optional, Union

from gameofthree.errors import GameAlreadyWon, GameNotActive, InvalidOperator
from gameofthree.models import GameSession, Seat, SessionStatus

WINNING_NUMBER = 1

_OPERATOR_TEXT = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Win:
    winner: Seat
    operator: int
    new_number: int = WINNING_NUMBER
    # Session state right after the move, filled in under the manager lock
    snapshot: Optional[dict] = field(default=None, compare=False)


@dataclass(frozen=True)
class Continue:
    new_number: int
    next_mover: Seat
    operator: int
    snapshot: Optional[dict] = field(default=None, compare=False)


MoveOutcome = Union[Win, Continue]


def compute_new_number(number: int, operator: int) -> int:
    """Return ``round((number + operator) / 3)``.

    Done in integer arithmetic. A third of an integer never ends in exactly
    .5, so every rounding mode gives the same answer here.
    """
    quotient, remainder = divmod(number + operator, 3)
    return quotient + 1 if remainder == 2 else quotient


def random_in_range(max_number: int, min_number: int, rng=random) -> int:
    """Whole number drawn uniformly from ``[min_number, max_number]``."""
    return math.floor(rng.random() * (max_number - min_number + 1)) + min_number


def parse_operator(value) -> int:
    """Validate a client supplied operator and return it as an int."""
    if isinstance(value, bool):
        raise InvalidOperator(f'Operator must be a whole number, got {value!r}')
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        raise InvalidOperator(f'Operator must be a whole number, got {value!r}')
    if isinstance(value, str):
        text = value.strip()
        if _OPERATOR_TEXT.fullmatch(text):
            return int(text)
    raise InvalidOperator(f'Operator must be a whole number, got {value!r}')


def apply_move(session: GameSession, operator: int) -> MoveOutcome:
    """Apply the turn owner's operator to the session.

    The new number goes to the opponent, who computes their next move from
    it. A move that reaches 1 wins for the mover; it is recorded in
    ``operations`` but the 1 itself is never pushed.
    """
    status = session.status
    if status is SessionStatus.WON:
        raise GameAlreadyWon(f'Game is over, Player {session.winner_id.label} won')
    if status is not SessionStatus.ACTIVE:
        raise GameNotActive()

    acting = session.player(session.moving_player_id)
    other = session.player(session.moving_player_id.other)

    session.operations.append(operator)
    new_number = compute_new_number(acting.last_number, operator)

    if new_number == WINNING_NUMBER:
        session.winner_id = acting.id
        return Win(winner=acting.id, operator=operator)

    other.numbers.append(new_number)
    session.moving_player_id = other.id
    return Continue(new_number=new_number, next_mover=other.id, operator=operator)
