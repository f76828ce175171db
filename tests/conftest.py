import os
import sys
import pytest

# Ensure the project root (containing the `numberguess` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from numberguess import create_app
from numberguess.config import TestingConfig
from numberguess.services import RoomStore, SessionCoordinator


@pytest.fixture()
def app_and_socketio():
    return create_app(TestingConfig)


@pytest.fixture()
def flask_app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture()
def socketio(app_and_socketio):
    return app_and_socketio[1]


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


def connect_player(flask_app, socketio):
    """Connect a Socket.IO test client and remember the id the server announced."""
    test_client = socketio.test_client(flask_app)
    received = test_client.get_received()
    connected = [pkt for pkt in received if pkt['name'] == 'connected']
    test_client.player_sid = connected[0]['args'][0]['id']
    return test_client


@pytest.fixture()
def host(flask_app, socketio):
    test_client = connect_player(flask_app, socketio)
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()


@pytest.fixture()
def guest(flask_app, socketio):
    test_client = connect_player(flask_app, socketio)
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()


@pytest.fixture()
def store():
    return RoomStore()


@pytest.fixture()
def coordinator(store):
    return SessionCoordinator(store)
