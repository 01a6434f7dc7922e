import logging
import os
from collections import deque

LOG_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'


def configure_logging(flask_app) -> None:
    """Apply LOG_LEVEL and attach the LOG_FILE handler to the app logger."""
    logger = flask_app.logger
    logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    # Factories may run more than once per process (tests); replace, don't stack
    for handler in [h for h in logger.handlers if getattr(h, '_estimator_file', False)]:
        logger.removeHandler(handler)
        handler.close()

    log_file = flask_app.config.get('LOG_FILE')
    if not log_file:
        return
    directory = os.path.dirname(log_file)
    if directory:
        os.makedirs(directory, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._estimator_file = True
    logger.addHandler(handler)


def tail(path, lines=100):
    """Return the last ``lines`` lines of ``path``. Raises OSError if unreadable."""
    if not path:
        raise FileNotFoundError('LOG_FILE is not configured')
    with open(path, encoding='utf-8', errors='replace') as fh:
        return ''.join(deque(fh, maxlen=max(0, int(lines))))
