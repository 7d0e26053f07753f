from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import random
import click
from config import Config

socketio = SocketIO(async_mode=None)


def _parse_origins(value):
    if not value or value.strip() == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__, static_folder='public', static_url_path='/static')
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'DEBUG'))

    allowed_origins = _parse_origins(flask_app.config.get('CORS_ORIGINS', '*'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(
        flask_app,
        cors_allowed_origins=allowed_origins,
        async_mode=flask_app.config.get('SOCKETIO_ASYNC_MODE'),
    )

    # One session manager per app; raises ValueError on an empty seed range
    from gameofthree.notifier import SocketIONotifier
    from gameofthree.services.game import SessionManager
    from gameofthree.socketio_events import EXTENSION_KEY, register_socketio_handlers
    manager = SessionManager(
        seed_min=int(flask_app.config.get('SEED_MIN', 2)),
        seed_max=int(flask_app.config.get('SEED_MAX', 56)),
    )
    flask_app.extensions[EXTENSION_KEY] = {
        'manager': manager,
        'notifier': SocketIONotifier(socketio),
    }

    from gameofthree.main import main
    flask_app.register_blueprint(main)

    register_socketio_handlers()

    @click.command('simulate-game')
    @click.option('--seed', type=int, default=None, help='Number seat B starts from (random if omitted).')
    @click.option('--moves', default='', help='Comma separated operators, seat B moves first.')
    def simulate_game_command(seed, moves):
        """Plays operators against a fresh in-memory session."""
        from gameofthree.models import Seat
        from gameofthree.services.game import Win, apply_move, join_session, parse_operator, start_session
        from gameofthree.errors import GameError

        session = start_session(
            Seat.A, int(flask_app.config.get('SEED_MIN', 2)), int(flask_app.config.get('SEED_MAX', 56)), random.Random()
        )
        if seed is not None:
            session.player_two.numbers = [seed]
        join_session(session, Seat.B)
        click.echo(f'Player {Seat.B.label} starts from {session.player_two.last_number}')

        for raw in [m for m in moves.split(',') if m.strip()]:
            mover = session.moving_player_id
            try:
                outcome = apply_move(session, parse_operator(raw))
            except GameError as exc:
                raise click.ClickException(exc.message)
            if isinstance(outcome, Win):
                click.echo(f'Player {mover.label} plays {outcome.operator} --> 1, Player {outcome.winner.label} is the winner')
                break
            click.echo(f'Player {mover.label} plays {outcome.operator} --> {outcome.new_number}')

    flask_app.cli.add_command(simulate_game_command)

    return flask_app
