import os
import sys
import pytest

# Ensure the project root (containing the `tictactoe` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tictactoe import create_app, socketio, GAMEBOARD_NAMESPACE


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    GAME_PAGE = '/tictactoe.html'
    CORS_ORIGINS = ['http://localhost:5173']
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
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace=GAMEBOARD_NAMESPACE
    )
    yield test_client
    try:
        test_client.disconnect(namespace=GAMEBOARD_NAMESPACE)
    except Exception:
        pass


@pytest.fixture()
def started_game(client):
    """Player 1 plays X, player 2 has joined as O."""
    client.post('/startgame', data={'type': 'X'})
    client.get('/joingame')
    return client
