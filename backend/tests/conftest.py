import os
import sys
import pytest

# Ensure the backend root (containing the `estimator` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from estimator import create_app, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    HOST_TAKEOVER = False
    LOG_LEVEL = 'DEBUG'
    LOG_FILE = ''
    LOG_TAIL_LINES = 100
    WEB_DIR = os.path.join(BACKEND_ROOT, 'web')


class RecordingHub:
    """Stands in for BroadcastHub in unit tests; keeps every emission."""

    def __init__(self):
        self.emitted = []

    def publish_all(self, event, payload):
        self.emitted.append((None, event, payload))

    def publish_to(self, topic, event, payload):
        if topic:
            self.emitted.append((topic, event, payload))

    def events(self):
        return [event for _, event, _ in self.emitted]


@pytest.fixture()
def hub():
    return RecordingHub()


@pytest.fixture()
def app_config():
    return TestConfig


@pytest.fixture()
def flask_app(app_config):
    application = create_app(app_config)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app):
    created = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def host_client(make_sio_client):
    return make_sio_client()


@pytest.fixture()
def player_client(make_sio_client):
    return make_sio_client()


def received(test_client, name=None):
    """Drain a Socket.IO test client, optionally keeping only ``name`` events."""
    packets = test_client.get_received()
    if name is None:
        return packets
    return [p for p in packets if p['name'] == name]
