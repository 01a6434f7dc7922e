from flask import Blueprint, current_app, jsonify, request

from estimator.session import get_session

polling = Blueprint('polling', __name__)


@polling.route('/getEstimations', methods=['GET'])
def get_estimations():
    """
    Returns the full ledger to the current host. Mirrors the host-only
    ``newEstimation`` push for clients whose socket is not (yet) reliable.
    """
    host_id = request.args.get('hostId')
    session = get_session()
    with session.lock:
        if host_id is None or not session.registry.authorize(host_id):
            current_app.logger.info(f"[poll-forbidden] hostId={host_id!r}")
            return jsonify({'error': 'Forbidden'}), 403
        ledger = session.round.snapshot()
    return jsonify(ledger), 200


@polling.route('/getTask', methods=['GET'])
def get_task():
    """
    Returns the active task and whether it is closed, so a player page can
    resynchronize on load or reconnect.
    """
    session = get_session()
    with session.lock:
        view = session.round.task_view()
    return jsonify(view), 200
