import os
import sys
import random
import pytest

# Ensure the backend root (containing the `dice_table` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from dice_table import create_app, socketio
from dice_table.session import ConnectionRegistry, DiceRoller, SessionCoordinator


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    HOST = '127.0.0.1'
    PORT = 3000
    ROLES = 'A,B,C'
    DICE_COUNT = 5
    DICE_FACES = 6
    DICE_SEED = 1234
    CORS_ORIGINS = '*'
    LOG_LEVEL = 'DEBUG'


class Outbox:
    """Stands in for the socket transport; records (sid, event, payload)."""

    def __init__(self):
        self.sent = []

    def __call__(self, sid, event, payload):
        self.sent.append((sid, event, payload))

    def to(self, sid, event=None):
        return [p for s, e, p in self.sent if s == sid and (event is None or e == event)]

    def named(self, event):
        return [(s, p) for s, e, p in self.sent if e == event]

    def clear(self):
        self.sent.clear()


@pytest.fixture()
def outbox():
    return Outbox()


@pytest.fixture()
def coordinator(outbox):
    registry = ConnectionRegistry(outbox)
    return SessionCoordinator(('A', 'B', 'C'), registry, dice=DiceRoller(random.Random(7)))


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    """Open any number of Socket.IO test clients against the same app."""
    opened = []

    def _open():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        opened.append(test_client)
        return test_client

    yield _open
    for test_client in opened:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def sio_client(sio_factory):
    return sio_factory()
