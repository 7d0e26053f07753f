import random
import threading
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from gameofthree.errors import GameNotActive, OutOfTurnMove, SessionStateError
from gameofthree.models import GameSession, Player, Seat, SessionStatus
from .engine import MoveOutcome, apply_move, parse_operator, random_in_range
from .seats import SeatAllocator

DEFAULT_SEED_MIN = 2
DEFAULT_SEED_MAX = 56


def start_session(seat_a: Seat, seed_min: int = DEFAULT_SEED_MIN,
                  seed_max: int = DEFAULT_SEED_MAX, rng=random) -> GameSession:
    """Fresh session for the first seated player; seat B gets the seed number."""
    return GameSession(
        player_one=Player(id=seat_a, numbers=[]),
        player_two=Player(id=None, numbers=[random_in_range(seed_max, seed_min, rng)]),
        moving_player_id=seat_a,
        operations=[],
    )


def join_session(session: GameSession, seat_b: Seat) -> GameSession:
    if session.player_one.id is None or session.player_two.id is not None:
        raise SessionStateError('join requires a session with only the first seat taken')
    session.player_two.id = seat_b
    session.moving_player_id = seat_b
    return session


@dataclass(frozen=True)
class Seating:
    seat: Seat
    # True when this connection completed the pair and the game began
    activated: bool
    # Seat B connection and opening state, captured with the seating when activated
    opponent: Optional[str] = None
    snapshot: Optional[dict] = field(default=None, compare=False)


@dataclass(frozen=True)
class Forfeit:
    winner: Seat
    loser: Seat
    snapshot: Optional[dict] = field(default=None, compare=False)


@dataclass(frozen=True)
class Departure:
    seat: Optional[Seat]
    # Connection still seated after the departure, if any
    remaining: Optional[str]


class SessionManager:
    """Owns the seat registry and the one game session.

    All state changes happen under a single lock so handlers dispatched on
    parallel workers never interleave a read-modify-write. Callers emit
    notifications from the returned values after the lock is released.

    Disconnect policy is reset: losing either seated player discards the
    session. A remaining seat A player immediately gets a fresh session;
    a remaining seat B player waits until someone claims seat A.
    """

    def __init__(self, seed_min: int = DEFAULT_SEED_MIN, seed_max: int = DEFAULT_SEED_MAX, rng=None):
        if seed_min > seed_max:
            raise ValueError(f'seed range is empty: min={seed_min} max={seed_max}')
        self.seed_min = seed_min
        self.seed_max = seed_max
        self.rng = rng or random.Random()
        self.seats = SeatAllocator()
        self.session: Optional[GameSession] = None
        # Bumped on every new session so timers armed for an old one go stale
        self.generation = 0
        self._lock = threading.Lock()

    @property
    def status(self) -> SessionStatus:
        with self._lock:
            return self.session.status if self.session else SessionStatus.EMPTY

    def seat_of(self, connection_id: str) -> Optional[Seat]:
        with self._lock:
            return self.seats.seat_of(connection_id)

    def occupant(self, seat: Seat) -> Optional[str]:
        with self._lock:
            return self.seats.occupant(seat)

    def occupied_seats(self) -> List[bool]:
        with self._lock:
            return self.seats.to_list()

    def snapshot(self) -> Optional[dict]:
        with self._lock:
            return self.session.to_dict() if self.session else None

    def connect(self, connection_id: str) -> Seating:
        """Seat a new connection. Raises SeatUnavailable when both are taken."""
        with self._lock:
            seat = self.seats.assign(connection_id)
            if seat is Seat.A:
                self._new_session()
            if not self._reconcile():
                return Seating(seat=seat, activated=False)
            return Seating(
                seat=seat,
                activated=True,
                opponent=self.seats.occupant(Seat.B),
                snapshot=self.session.to_dict(),
            )

    def disconnect(self, connection_id: str) -> Departure:
        with self._lock:
            seat = self.seats.seat_of(connection_id)
            if seat is None:
                return Departure(seat=None, remaining=None)
            self.seats.release(seat)
            self.session = None
            if self.seats.is_occupied(Seat.A):
                self._new_session()
            return Departure(seat=seat, remaining=self.seats.occupant(seat.other))

    def _new_session(self) -> None:
        self.generation += 1
        self.session = start_session(Seat.A, self.seed_min, self.seed_max, self.rng)

    def _reconcile(self) -> bool:
        # Both seats filled but seat B not yet in the game
        if (self.session is not None and self.session.status is SessionStatus.SEATED_ONE
                and self.seats.is_occupied(Seat.A) and self.seats.is_occupied(Seat.B)):
            join_session(self.session, Seat.B)
            return True
        return False

    def submit_move(self, connection_id: str, raw_operator) -> MoveOutcome:
        with self._lock:
            seat = self.seats.seat_of(connection_id)
            if seat is None:
                raise OutOfTurnMove('You do not hold a seat in this game')
            if self.session is None:
                raise GameNotActive()
            status = self.session.status
            if status is SessionStatus.ACTIVE and self.session.moving_player_id != seat:
                raise OutOfTurnMove()
            operator = parse_operator(raw_operator)
            outcome = apply_move(self.session, operator)
            return replace(outcome, snapshot=self.session.to_dict())

    def turn_token(self) -> Optional[Tuple[int, int]]:
        """Identifies the current turn of the active session, for timers."""
        with self._lock:
            if self.session is None or self.session.status is not SessionStatus.ACTIVE:
                return None
            return (self.generation, self.session.move_count)

    def expire_turn(self, token: Tuple[int, int]) -> Optional[Forfeit]:
        """Forfeit the turn owner if the turn identified by token is still open."""
        with self._lock:
            session = self.session
            if session is None or session.status is not SessionStatus.ACTIVE:
                return None
            if (self.generation, session.move_count) != tuple(token):
                return None
            loser = session.moving_player_id
            session.winner_id = loser.other
            return Forfeit(winner=loser.other, loser=loser, snapshot=session.to_dict())
