from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ALLOWED_ORIGINS') or []
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from gameroom.channel import SocketIOChannel
    from gameroom.coordinator import SessionCoordinator
    from gameroom.games import DrawGuessEngine, TicTacToeEngine
    from gameroom.registry import RoomRegistry

    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    engines = [
        TicTacToeEngine(),
        DrawGuessEngine(reveal_word=flask_app.config.get('DRAW_GUESS_REVEAL_WORD', False)),
    ]
    registry = RoomRegistry({engine.kind: engine.new_room for engine in engines})
    flask_app.extensions['gameroom'] = SessionCoordinator(
        registry,
        SocketIOChannel(socketio, namespace=namespace),
        engines,
        flask_app.logger,
        reap_empty_rooms=flask_app.config.get('REAP_EMPTY_ROOMS', False),
    )

    from gameroom.routes import main
    flask_app.register_blueprint(main)

    # Importing here ensures the handlers bind to the initialized socketio instance
    from gameroom.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace)

    return flask_app
