from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional


class Seat(IntEnum):
    A = 0
    B = 1

    @property
    def other(self) -> 'Seat':
        return Seat.B if self is Seat.A else Seat.A

    @property
    def label(self) -> int:
        # Players are numbered from 1 in user facing text
        return int(self) + 1


class SessionStatus(str, Enum):
    EMPTY = 'empty'
    SEATED_ONE = 'seated_one'
    ACTIVE = 'active'
    WON = 'won'


@dataclass
class Player:
    id: Optional[Seat] = None
    numbers: List[int] = field(default_factory=list)

    @property
    def last_number(self) -> Optional[int]:
        return self.numbers[-1] if self.numbers else None

    def to_dict(self):
        return {
            'id': None if self.id is None else int(self.id),
            'numbers': list(self.numbers),
        }


@dataclass
class GameSession:
    player_one: Player
    player_two: Player
    moving_player_id: Optional[Seat] = None
    operations: List[int] = field(default_factory=list)
    winner_id: Optional[Seat] = None

    @property
    def status(self) -> SessionStatus:
        if self.winner_id is not None:
            return SessionStatus.WON
        if self.player_two.id is None:
            return SessionStatus.SEATED_ONE
        return SessionStatus.ACTIVE

    @property
    def move_count(self) -> int:
        return len(self.operations)

    def player(self, seat: Seat) -> Player:
        if self.player_one.id == seat:
            return self.player_one
        if self.player_two.id == seat:
            return self.player_two
        raise KeyError(seat)

    def to_dict(self):
        # camelCase keys are what the browser client reads
        return {
            'playerOne': self.player_one.to_dict(),
            'playerTwo': self.player_two.to_dict(),
            'movingPlayerId': None if self.moving_player_id is None else int(self.moving_player_id),
            'operations': list(self.operations),
            'status': self.status.value,
            'winnerId': None if self.winner_id is None else int(self.winner_id),
        }
