import os
import sys
import pytest

# Ensure the backend root (containing the `gameroom` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from gameroom import create_app, socketio

class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ALLOWED_ORIGINS = ['http://localhost:3000']
    SOCKETIO_NAMESPACE = '/'
    LOG_LEVEL = 'DEBUG'
    REAP_EMPTY_ROOMS = False
    DRAW_GUESS_REVEAL_WORD = False

@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application

@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()

@pytest.fixture()
def coordinator(flask_app):
    return flask_app.extensions['gameroom']

@pytest.fixture()
def connect(flask_app):
    """Factory for Socket.IO test clients; all are disconnected on teardown."""
    opened = []

    def _connect(app=None):
        test_client = socketio.test_client(app or flask_app, flask_test_client=(app or flask_app).test_client())
        opened.append(test_client)
        return test_client

    yield _connect
    for test_client in opened:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass

def drain(sio_client):
    """(event, payload) pairs waiting for this client, oldest first."""
    return [(pkt['name'], pkt['args'][0] if pkt['args'] else None)
            for pkt in sio_client.get_received()]

def payloads(events, name):
    return [payload for event, payload in events if event == name]

def last_state(sio_client):
    states = payloads(drain(sio_client), 'gameState')
    return states[-1] if states else None
