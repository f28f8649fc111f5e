from flask import current_app, request
from flask_socketio import emit
from tictactoe import socketio, GAMEBOARD_NAMESPACE, GAMEBOARD_EVENT


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    """Register the viewer and send it the board as it stands now."""
    sid = _get_sid()
    current_app.extensions['viewers'].register(sid)
    current_app.logger.info(f"[viewer-connect] sid={sid}")
    emit(GAMEBOARD_EVENT, current_app.extensions['game_session'].snapshot())


def handle_disconnect(reason=None):
    sid = _get_sid()
    current_app.extensions['viewers'].unregister(sid)
    current_app.logger.info(f"[viewer-disconnect] sid={sid}")


def register_socketio_handlers(namespace: str = GAMEBOARD_NAMESPACE) -> None:
    """Register the viewer Socket.IO handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
