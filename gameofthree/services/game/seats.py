from typing import List, Optional

from gameofthree.errors import SeatUnavailable
from gameofthree.models import Seat


class SeatAllocator:
    """Two-slot registry mapping seats to the connection occupying them.

    Slots are scanned in seat order, so the first free connection always
    lands on seat A. Notifying anyone is the caller's job.
    """

    def __init__(self):
        self._slots: List[Optional[str]] = [None] * len(Seat)

    def assign(self, connection_id: str) -> Seat:
        for seat in Seat:
            if self._slots[seat] is None:
                self._slots[seat] = connection_id
                return seat
        raise SeatUnavailable()

    def release(self, seat: Seat) -> None:
        # Releasing a free seat is a no-op
        self._slots[seat] = None

    def occupant(self, seat: Seat) -> Optional[str]:
        return self._slots[seat]

    def is_occupied(self, seat: Seat) -> bool:
        return self._slots[seat] is not None

    def seat_of(self, connection_id: str) -> Optional[Seat]:
        for seat in Seat:
            if self._slots[seat] == connection_id:
                return seat
        return None

    def free_seats(self) -> List[Seat]:
        return [seat for seat in Seat if self._slots[seat] is None]

    def to_list(self) -> List[bool]:
        return [slot is not None for slot in self._slots]
