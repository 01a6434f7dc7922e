from flask import current_app, request
from flask_socketio import emit, join_room, leave_room

from estimator import socketio
from estimator.events import parse_event
from estimator.exceptions import EstimatorError
from estimator.session import get_session


def _get_sid() -> str:
    return request.sid  # type: ignore


def _reject(exc: EstimatorError) -> None:
    current_app.logger.warning(f"[event-rejected] sid={_get_sid()} {exc}")
    emit('error', {'message': str(exc)})


def handle_connect(auth=None):
    current_app.logger.debug(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    # A dropped host must not leave stale authorization behind
    session = get_session()
    with session.lock:
        released = session.registry.release(_get_sid())
    if released:
        current_app.logger.info(f"[disconnect] host sid={_get_sid()} released reason={reason}")


# ---- host events ----

def handle_subscribe(data=None):
    session = get_session()
    sid = _get_sid()
    try:
        event = parse_event('subscribe', data)
        with session.lock:
            previous = session.registry.topic_of(sid)
            session.registry.subscribe(sid, event.topic)
    except EstimatorError as exc:
        _reject(exc)
        return
    # A host moving to a new topic stops listening on the old one
    if previous and previous != event.topic:
        leave_room(previous)
    join_room(event.topic)
    emit('subscribed', {'topic': event.topic})


def handle_unsubscribe(data=None):
    session = get_session()
    try:
        event = parse_event('unsubscribe', data)
    except EstimatorError as exc:
        _reject(exc)
        return
    leave_room(event.topic)
    try:
        with session.lock:
            previous = session.registry.unsubscribe(_get_sid(), event.topic)
    except EstimatorError as exc:
        _reject(exc)
        return
    if previous and previous != event.topic:
        leave_room(previous)
    emit('unsubscribed', {'topic': event.topic})


def handle_new_round(data=None):
    session = get_session()
    try:
        event = parse_event('newRound', data)
    except EstimatorError as exc:
        _reject(exc)
        return
    with session.lock:
        session.round.start(event.task)


def handle_close_round(data=None):
    session = get_session()
    try:
        parse_event('closeRound', data)
    except EstimatorError as exc:
        _reject(exc)
        return
    with session.lock:
        session.round.close()


def handle_reveal_result(data=None):
    session = get_session()
    try:
        parse_event('revealResult', data)
    except EstimatorError as exc:
        _reject(exc)
        return
    with session.lock:
        session.round.reveal()


def handle_clear_round(data=None):
    session = get_session()
    try:
        parse_event('clearRound', data)
    except EstimatorError as exc:
        _reject(exc)
        return
    with session.lock:
        session.round.clear()


# ---- player events ----

def handle_add_estimation(data=None):
    session = get_session()
    try:
        event = parse_event('addEstimation', data)
    except EstimatorError as exc:
        _reject(exc)
        return
    with session.lock:
        session.round.submit(event.name, event.estimation)


HANDLERS = {
    'connect': handle_connect,
    'disconnect': handle_disconnect,
    'subscribe': handle_subscribe,
    'unsubscribe': handle_unsubscribe,
    'newRound': handle_new_round,
    'closeRound': handle_close_round,
    'revealResult': handle_reveal_result,
    'clearRound': handle_clear_round,
    'addEstimation': handle_add_estimation,
}


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register the Socket.IO event handlers on ``namespace``."""
    for name, handler in HANDLERS.items():
        socketio.on_event(name, handler, namespace=namespace)
