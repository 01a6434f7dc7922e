"""Errors raised by the estimation session.

Socket handlers catch ``EstimatorError`` and report it to the sender only;
nothing here is fatal to the service.
"""


class EstimatorError(Exception):
    """Base class for all session errors."""
    pass


class InvalidPayload(EstimatorError):
    """An inbound event is missing a field or carries a value of the wrong type."""
    def __init__(self, event, reason):
        self.event = event
        self.reason = reason
        super().__init__(f"Invalid payload for '{event}': {reason}")


class HostAlreadyAssigned(EstimatorError):
    """Another connection already holds the facilitator role."""
    def __init__(self, topic):
        self.topic = topic
        super().__init__(f"A host is already subscribed on topic '{topic}'")


class NotHost(EstimatorError):
    """The connection tried a host-only action without holding the role."""
    pass
