from flask import current_app, request
from gameroom import socketio
from gameroom.coordinator import SessionCoordinator


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _coordinator() -> SessionCoordinator:
    return current_app.extensions['gameroom']


def handle_connect(auth=None):
    _coordinator().connect(_get_sid())


def handle_disconnect(reason=None):
    _coordinator().disconnect(_get_sid())


def handle_join_tictactoe(room_id=None):
    _coordinator().join_tictactoe(_get_sid(), room_id)


def handle_make_move(data=None):
    _coordinator().make_move(_get_sid(), data)


def handle_restart_tictactoe(room_id=None):
    _coordinator().restart_tictactoe(_get_sid(), room_id)


def handle_join_draw_guess(room_id=None):
    _coordinator().join_draw_guess(_get_sid(), room_id)


def handle_draw(data=None):
    _coordinator().draw(_get_sid(), data)


def handle_guess(data=None):
    _coordinator().guess(_get_sid(), data)


def handle_error(exc):
    event = getattr(request, 'event', None) or {}
    current_app.logger.exception(f"[handler-error] sid={_get_sid()} event={event.get('message')}: {exc}")


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``.

    Event names are the ones the existing browser clients emit, so they stay
    camelCase.
    """
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('joinTicTacToe', handle_join_tictactoe, namespace=namespace)
    socketio.on_event('makeMove', handle_make_move, namespace=namespace)
    socketio.on_event('restartTicTacToe', handle_restart_tictactoe, namespace=namespace)
    socketio.on_event('joinDrawGuess', handle_join_draw_guess, namespace=namespace)
    socketio.on_event('draw', handle_draw, namespace=namespace)
    socketio.on_event('guess', handle_guess, namespace=namespace)
    # Handlers never take the server down; failures are logged and dropped
    socketio.on_error_default(handle_error)
