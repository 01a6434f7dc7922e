import os

BACKEND_ROOT = os.path.abspath(os.path.dirname(__file__))


def _env_flag(name, default='0'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('ESTIMATOR_HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    # Comma separated; '*' allows any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Legacy behaviour: a second host subscription silently displaces the first
    HOST_TAKEOVER = _env_flag('HOST_TAKEOVER')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    # Empty string disables file logging (and the /logs tail)
    LOG_FILE = os.environ.get('LOG_FILE', os.path.join(BACKEND_ROOT, 'db', 'logs.log'))
    LOG_TAIL_LINES = int(os.environ.get('LOG_TAIL_LINES', '100'))
    WEB_DIR = os.environ.get('WEB_DIR', os.path.join(BACKEND_ROOT, 'web'))
