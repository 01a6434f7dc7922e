from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(value):
    origins = [o.strip() for o in (value or '').split(',') if o.strip()]
    if not origins or '*' in origins:
        return '*'
    return origins


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    # Ledger JSON keeps submission order
    flask_app.json.sort_keys = False

    from estimator.logs import configure_logging
    configure_logging(flask_app)

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ORIGINS'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One session per app; handlers look it up through get_session()
    from estimator.broadcast import BroadcastHub
    from estimator.session import EXTENSION_KEY, EstimationSession
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    hub = BroadcastHub(socketio, namespace=namespace)
    flask_app.extensions[EXTENSION_KEY] = EstimationSession(
        hub, takeover=flask_app.config.get('HOST_TAKEOVER', False)
    )

    from estimator.routes import main
    flask_app.register_blueprint(main)

    from estimator.api.polling import polling
    flask_app.register_blueprint(polling)

    from estimator.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    @click.command('tail-logs')
    @click.option('-n', '--lines', default=None, type=int, help='Number of lines to show.')
    def tail_logs_command(lines):
        """Prints the end of the server log file."""
        from estimator.logs import tail
        count = lines if lines is not None else flask_app.config.get('LOG_TAIL_LINES', 100)
        try:
            click.echo(tail(flask_app.config.get('LOG_FILE'), count), nl=False)
        except OSError as exc:
            raise click.ClickException(str(exc))

    flask_app.cli.add_command(tail_logs_command)

    return flask_app
