import os
import sys
import pytest

# Ensure the project root (containing the `gameofthree` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from gameofthree import create_app, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SEED_MIN = 2
    SEED_MAX = 56
    CORS_ORIGINS = '*'
    LOG_LEVEL = 'DEBUG'
    TURN_TIMEOUT_SEC = 0
    SOCKETIO_ASYNC_MODE = 'threading'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def manager(flask_app):
    return flask_app.extensions['gameofthree']['manager']


@pytest.fixture()
def connect(flask_app):
    """Factory for Socket.IO test clients; all are disconnected on teardown."""
    opened = []

    def _connect():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        opened.append(test_client)
        return test_client

    yield _connect
    for test_client in opened:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


def events(received, name):
    """Payloads of every received event called name, in arrival order."""
    return [pkt['args'][0] if pkt['args'] else None for pkt in received if pkt['name'] == name]
