import random

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(value):
    if isinstance(value, (list, tuple)):
        return list(value)
    return [origin.strip() for origin in (value or '').split(',') if origin.strip()]


def create_app(config_class=Config, scheduler=None, rng=None):
    """Build the Flask app and its game service.

    ``scheduler`` and ``rng`` replace the background timer scheduler and the
    question shuffler; tests pass deterministic versions of both.
    """
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = _allowed_origins(flask_app.config.get('CLIENT_URL'))
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from trivia.services.games import GameService, GameSettings
    from trivia.services.games.broadcast import SocketIOBroadcaster
    from trivia.services.games.scheduler import BackgroundScheduler

    flask_app.extensions['trivia'] = GameService(
        broadcaster=SocketIOBroadcaster(socketio),
        scheduler=scheduler or BackgroundScheduler(socketio, logger=flask_app.logger),
        settings=GameSettings.from_config(flask_app.config),
        rng=rng or random.Random(),
        logger=flask_app.logger,
    )

    from trivia.main import main
    flask_app.register_blueprint(main)

    from trivia.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    return flask_app
