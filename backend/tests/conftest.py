import os
import sys
import pytest

# Ensure the backend root (containing the `wordgrid` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from wordgrid import create_app, socketio
from wordgrid.services.games import GameStore

# Tiles 1..16 read A..P, so [6, 1, 2] spells FAB and [12, 15, 1, 4] spells LOAD
ALPHABET_BOARD = list('abcdefghijklmnop')
WORDS = ['fab', 'load', 'fink', 'knife', 'def', 'aba', 'abcdhg']


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = ['http://localhost:5173']
    ADJACENCY_MODE = 'offset'
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def store():
    return GameStore()


@pytest.fixture()
def ready_game(store):
    game = store.create_game({'board': ALPHABET_BOARD})
    store.attach_dictionary(game.game_id, {'words': WORDS})
    return game


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
