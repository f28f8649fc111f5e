from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)

# Namespace and event used to push the board to viewers
GAMEBOARD_NAMESPACE = '/gameboard'
GAMEBOARD_EVENT = 'gameboard'


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One shared game per process, plus the viewers watching it
    from tictactoe.services.games import GameSession, ViewerBroadcaster

    def _emit_board(payload, sid):
        socketio.emit(GAMEBOARD_EVENT, payload, to=sid, namespace=GAMEBOARD_NAMESPACE)

    flask_app.extensions['game_session'] = GameSession()
    flask_app.extensions['viewers'] = ViewerBroadcaster(_emit_board, logger=flask_app.logger)

    # Import and register blueprints here
    from tictactoe.routes import main
    flask_app.register_blueprint(main)

    from tictactoe.api.games import games
    flask_app.register_blueprint(games)

    # Register Socket.IO event handlers
    from tictactoe.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    return flask_app
