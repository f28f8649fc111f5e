from typing import Optional
from flask import Blueprint, jsonify, request, redirect, current_app
from tictactoe.models import Mark
from tictactoe.services.games import GameSession, ViewerBroadcaster


games = Blueprint('games', __name__)

PLAYER_IDS = (1, 2)


def _session() -> GameSession:
    return current_app.extensions['game_session']


def _viewers() -> ViewerBroadcaster:
    return current_app.extensions['viewers']


def _params() -> dict:
    """Form fields, falling back to a JSON body."""
    if request.form:
        return request.form.to_dict()
    return request.get_json(silent=True) or {}


def _coord(value) -> Optional[int]:
    """A JSON int or an integer string; floats and booleans are rejected."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _respond(message):
    return jsonify(message.to_dict()), message.code


@games.route('/newgame', methods=['GET'])
def new_game():
    result = _session().restart()
    current_app.logger.info("[newgame] board reset")
    _viewers().broadcast(result.snapshot)
    return redirect(current_app.config['GAME_PAGE'])


@games.route('/startgame', methods=['POST'])
def start_game():
    raw = str(_params().get('type') or '').strip().upper()
    if not raw:
        return jsonify({'error': 'Field "type" is required'}), 400
    try:
        mark = Mark(raw[0])
    except ValueError:
        return jsonify({'error': 'Field "type" must be X or O'}), 400

    session = _session()
    result = session.start(mark)
    if result.changed:
        current_app.logger.info(f"[startgame] player=1 type={mark.value}")
        return jsonify(result.snapshot)
    current_app.logger.info("[startgame] player 1 already seated, ignoring")
    return jsonify(session.snapshot())


@games.route('/joingame', methods=['GET'])
def join_game():
    result = _session().join()
    if not result.changed:
        current_app.logger.info(f"[joingame] rejected: {result.message.message}")
        return _respond(result.message)
    current_app.logger.info(f"[joingame] player=2 type={result.snapshot['player2']['type']}")
    _viewers().broadcast(result.snapshot)
    return redirect(f"{current_app.config['GAME_PAGE']}?p=2")


@games.route('/move/<player_id>', methods=['POST'])
def move(player_id):
    try:
        pid = int(player_id)
    except ValueError:
        pid = None
    if pid not in PLAYER_IDS:
        return jsonify({'error': f'Unknown player id {player_id}'}), 400

    data = _params()
    row = _coord(data.get('x'))
    col = _coord(data.get('y'))
    if row is None or col is None:
        return jsonify({'error': 'Fields "x" and "y" must be integers'}), 400

    result = _session().move(pid, row, col)
    current_app.logger.info(
        f"[move] player={pid} x={row} y={col} outcome={result.message.outcome.value}"
    )
    if result.changed:
        _viewers().broadcast(result.snapshot)
    return _respond(result.message)


@games.route('/gameboard', methods=['GET'])
def get_board():
    return jsonify(_session().snapshot())
