from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return current_app.send_static_file('index.html')


@main.route('/health')
def health():
    return jsonify({'status': 'ok'})


@main.route('/api/session')
def get_session():
    """
    Returns the current game snapshot and which seats are occupied.
    """
    from gameofthree.socketio_events import EXTENSION_KEY
    manager = current_app.extensions[EXTENSION_KEY]['manager']
    return jsonify({
        'status': manager.status.value,
        'game': manager.snapshot(),
        'seats': manager.occupied_seats(),
    }), 200
