import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    PORT = int(os.environ.get('PORT', '3000'))
    # Closed range the seat B seed number is drawn from
    SEED_MIN = int(os.environ.get('SEED_MIN', '2'))
    SEED_MAX = int(os.environ.get('SEED_MAX', '56'))
    # Comma separated list, '*' allows any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')
    # Seconds a player has to move before forfeiting. 0 disables.
    TURN_TIMEOUT_SEC = int(os.environ.get('TURN_TIMEOUT_SEC', '0'))
    # threading, eventlet or gevent; None lets Flask-SocketIO pick
    SOCKETIO_ASYNC_MODE = os.environ.get('SOCKETIO_ASYNC_MODE') or None
