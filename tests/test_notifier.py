import pytest

from gameofthree.notifier import SocketIONotifier


class RecordingSocketIO:
    def __init__(self):
        self.emitted = []

    def emit(self, event, payload, **kwargs):
        self.emitted.append((event, payload, kwargs))


def test_send_to_targets_one_connection():
    sio = RecordingSocketIO()
    SocketIONotifier(sio).send_to('sid-1', 'info', 'hello')
    assert sio.emitted == [('info', 'hello', {'to': 'sid-1', 'namespace': '/'})]


def test_broadcast_except_skips_sender():
    sio = RecordingSocketIO()
    SocketIONotifier(sio, namespace='/game').broadcast_except('sid-1', 'game', {})
    assert sio.emitted == [('game', {}, {'skip_sid': 'sid-1', 'namespace': '/game'})]


def test_missing_sid_is_refused_instead_of_broadcast():
    sio = RecordingSocketIO()
    notifier = SocketIONotifier(sio)
    with pytest.raises(ValueError):
        notifier.send_to(None, 'game', {})
    with pytest.raises(ValueError):
        notifier.broadcast_except(None, 'waiting', 'Wait, other Player is moving')
    assert sio.emitted == []
