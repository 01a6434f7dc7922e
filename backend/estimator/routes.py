import os
from html import escape

from flask import Blueprint, current_app, jsonify, send_from_directory

from estimator.logs import tail

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the estimator server!'})


@main.route('/player')
def player_page():
    return send_from_directory(current_app.config['WEB_DIR'], 'player.html')


@main.route('/host')
def host_page():
    return send_from_directory(current_app.config['WEB_DIR'], 'host.html')


@main.route('/icon.png')
def icon():
    return send_from_directory(os.path.join(current_app.config['WEB_DIR'], 'images'), 'icon.png')


@main.route('/<path:filename>')
def web_asset(filename):
    # Anything else under WEB_DIR; send_from_directory refuses paths outside it
    return send_from_directory(current_app.config['WEB_DIR'], filename)


@main.route('/logs')
def logs():
    try:
        text = tail(current_app.config.get('LOG_FILE'), current_app.config.get('LOG_TAIL_LINES', 100))
    except OSError as exc:
        current_app.logger.error(f"[logs] {exc}")
        return f"Error: {exc}", 500
    return f"<pre>{escape(text)}</pre>"
