import random

from flask import Flask, current_app
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config
from dice_table.session import ConnectionRegistry, DiceRoller, SessionCoordinator

COORDINATOR_KEY = 'session_coordinator'

socketio = SocketIO(async_mode=None)


def _allowed_origins(value):
    if not value or value == '*':
        return '*'
    if isinstance(value, str):
        return [origin.strip() for origin in value.split(',') if origin.strip()]
    return list(value)


def _build_coordinator(flask_app) -> SessionCoordinator:
    cfg = flask_app.config
    seed = cfg.get('DICE_SEED')
    rng = random.Random(seed) if seed not in (None, '') else random.Random()
    dice = DiceRoller(
        rng,
        count=int(cfg.get('DICE_COUNT', 5)),
        faces=int(cfg.get('DICE_FACES', 6)),
    )
    # Imported here so the handlers module binds to the initialized socketio instance
    from dice_table.socketio_events import send_to_sid
    registry = ConnectionRegistry(send_to_sid, logger=flask_app.logger)
    return SessionCoordinator(cfg.get('ROLES'), registry, dice=dice, logger=flask_app.logger)


def get_coordinator() -> SessionCoordinator:
    return current_app.extensions[COORDINATOR_KEY]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL') or 'INFO')

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ORIGINS'))
    CORS(flask_app, origins=allowed_origins, methods=['GET', 'POST'])

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One table per process; all session state hangs off this object
    flask_app.extensions[COORDINATOR_KEY] = _build_coordinator(flask_app)

    from dice_table.routes import main
    flask_app.register_blueprint(main)

    from dice_table.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    return flask_app
