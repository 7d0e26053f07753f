from flask import current_app, request

from gameofthree import socketio
from gameofthree.errors import GameError, SeatUnavailable
from gameofthree.notifier import (
    BLOCKED, ERROR, GAME, INFO, NO_SEAT, OTHER_IS_MOVING, PLAYER_NUMBER, WAITING, WAITING_FOR_JOIN,
    SocketIONotifier,
)
from gameofthree.services.game import Forfeit, Seating, SessionManager, Win
from gameofthree.services.game.timers import schedule_turn_timer

EXTENSION_KEY = 'gameofthree'


def _get_sid() -> str:
    return request.sid  # type: ignore


def _manager() -> SessionManager:
    return current_app.extensions[EXTENSION_KEY]['manager']


def _notifier() -> SocketIONotifier:
    return current_app.extensions[EXTENSION_KEY]['notifier']


def handle_connect(auth=None):
    sid = _get_sid()
    manager, notifier = _manager(), _notifier()
    try:
        seating = manager.connect(sid)
    except SeatUnavailable:
        current_app.logger.info(f"[seat-reject] sid={sid} both seats taken")
        notifier.send_to(sid, PLAYER_NUMBER, NO_SEAT)
        notifier.send_to(sid, WAITING, BLOCKED)
        return

    current_app.logger.debug(f"[seat-assign] sid={sid} seat={int(seating.seat)}")
    notifier.send_to(sid, PLAYER_NUMBER, int(seating.seat))
    if seating.activated:
        announce_start(manager, notifier, seating)
    else:
        notifier.send_to(sid, WAITING, WAITING_FOR_JOIN)


def handle_disconnect(reason=None):
    sid = _get_sid()
    manager, notifier = _manager(), _notifier()
    departure = manager.disconnect(sid)
    if departure.seat is None:
        current_app.logger.debug(f"[disconnect] sid={sid} unseated")
        return
    current_app.logger.info(f"[disconnect] seat={int(departure.seat)} policy=reset")
    if departure.remaining:
        notifier.send_to(departure.remaining, INFO, f'Player {departure.seat.label} left the game')
        notifier.send_to(departure.remaining, WAITING, WAITING_FOR_JOIN)


def handle_next_move(data=None):
    sid = _get_sid()
    manager, notifier = _manager(), _notifier()
    current_app.logger.debug(f"[next-move] sid={sid} data={data!r}")
    try:
        outcome = manager.submit_move(sid, data)
    except GameError as exc:
        current_app.logger.info(f"[move-reject] sid={sid} code={exc.code} message={exc.message}")
        notifier.send_to(sid, ERROR, exc.to_dict())
        return

    snapshot = outcome.snapshot
    if isinstance(outcome, Win):
        current_app.logger.info(f"[win] seat={int(outcome.winner)} op={outcome.operator}")
        notifier.broadcast(INFO, f'Player {outcome.winner.label} is the winner')
        notifier.broadcast_except(sid, WAITING, '')
        notifier.broadcast(GAME, snapshot)
        return

    current_app.logger.debug(
        f"[move] seat={int(outcome.next_mover.other)} op={outcome.operator} "
        f"new={outcome.new_number} next={int(outcome.next_mover)}"
    )
    notifier.send_to(sid, WAITING, OTHER_IS_MOVING)
    notifier.send_to(sid, INFO, f'your move: {outcome.operator} --> new number: {outcome.new_number}')
    notifier.broadcast_except(sid, GAME, snapshot)
    _arm_turn_timer(manager, notifier)


def announce_start(manager: SessionManager, notifier, seating: Seating) -> None:
    """Seat B receives the opening state, everyone else is told to wait."""
    seat_b = seating.opponent
    current_app.logger.info("[start] both seats taken, seat 1 moves first")
    notifier.send_to(seat_b, GAME, seating.snapshot)
    notifier.broadcast_except(seat_b, WAITING, OTHER_IS_MOVING)
    _arm_turn_timer(manager, notifier)


def announce_forfeit(notifier, forfeit: Forfeit, snapshot) -> None:
    notifier.broadcast(
        INFO, f'Player {forfeit.loser.label} ran out of time, Player {forfeit.winner.label} is the winner'
    )
    notifier.broadcast(WAITING, '')
    notifier.broadcast(GAME, snapshot)


def _arm_turn_timer(manager: SessionManager, notifier) -> None:
    schedule_turn_timer(
        current_app._get_current_object(),
        manager,
        lambda forfeit: announce_forfeit(notifier, forfeit, forfeit.snapshot),
    )


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers.

    Handlers resolve the session manager through ``current_app`` so a
    re-created app (as in tests) never talks to a stale manager.
    """
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('next-move', handle_next_move, namespace=namespace)
