import logging

logger = logging.getLogger(__name__)


class BroadcastHub:
    """Fan-out over a Socket.IO namespace.

    Delivery is best effort to whoever is connected at the time of the call;
    there is no queue and no replay for late joiners.
    """

    def __init__(self, socketio, namespace='/'):
        self.socketio = socketio
        self.namespace = namespace

    def publish_all(self, event, payload):
        self.socketio.emit(event, payload, namespace=self.namespace)

    def publish_to(self, topic, event, payload):
        # socketio.emit with an empty room would broadcast to everyone
        if not topic:
            logger.debug(f"[emit-skip] event={event} no topic")
            return
        self.socketio.emit(event, payload, to=topic, namespace=self.namespace)
