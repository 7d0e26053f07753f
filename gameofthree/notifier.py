from typing import Any, Protocol

# Event names the browser client listens for
GAME = 'game'
INFO = 'info'
WAITING = 'waiting'
PLAYER_NUMBER = 'playerNumber'
ERROR = 'error'

# Waiting notices
WAITING_FOR_JOIN = 'Waiting for other player join...'
BLOCKED = 'Please wait, game already running'
OTHER_IS_MOVING = 'Wait, other Player is moving'

NO_SEAT = -1


class Notifier(Protocol):
    def send_to(self, sid: str, event: str, payload: Any) -> None: ...

    def broadcast_except(self, sid: str, event: str, payload: Any) -> None: ...

    def broadcast(self, event: str, payload: Any) -> None: ...


class SocketIONotifier:
    """Delivers events through a Flask-SocketIO server.

    Uses ``socketio.emit`` rather than the request bound ``emit`` so it also
    works from background tasks such as the turn timer.
    """

    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def send_to(self, sid, event, payload):
        # to=None would reach every connection
        if sid is None:
            raise ValueError(f"cannot send {event!r} without a target sid")
        self.socketio.emit(event, payload, to=sid, namespace=self.namespace)

    def broadcast_except(self, sid, event, payload):
        if sid is None:
            raise ValueError(f"cannot exclude a missing sid from {event!r}")
        self.socketio.emit(event, payload, skip_sid=sid, namespace=self.namespace)

    def broadcast(self, event, payload):
        self.socketio.emit(event, payload, namespace=self.namespace)
