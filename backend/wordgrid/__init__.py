from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from wordgrid.config import Config
from wordgrid.services.games import GameStore

socketio = SocketIO(async_mode=None)


def get_store() -> GameStore:
    """The GameStore owned by the current Flask app."""
    from flask import current_app
    return current_app.extensions['game_store']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS', [])
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Each app owns its own store; nothing is shared between app instances
    flask_app.extensions['game_store'] = GameStore(
        adjacency_mode=flask_app.config.get('ADJACENCY_MODE', 'offset'),
    )

    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from wordgrid.main import main
    flask_app.register_blueprint(main)

    from wordgrid.api.games import games
    flask_app.register_blueprint(games, url_prefix='/games')
    # Mirror under /api for the frontend API client
    flask_app.register_blueprint(games, url_prefix='/api/games', name='api_games')

    from wordgrid.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('games-reset')
    def games_reset_command():
        """Drops every game held in memory."""
        flask_app.extensions['game_store'].reset()
        click.echo('All games have been dropped!')

    flask_app.cli.add_command(games_reset_command)

    return flask_app
