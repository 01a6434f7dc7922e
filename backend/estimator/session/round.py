import logging

from estimator.session.ledger import EstimationLedger

logger = logging.getLogger(__name__)

EMPTY = 'empty'
OPEN = 'open'
CLOSED = 'closed'


class RoundStateMachine:
    """The single active round and the only writer of its ledger.

    ``task`` and ``is_closed`` are independent flags: a round may be closed
    with no task set, and closing or revealing is legal from any state.
    """

    def __init__(self, ledger: EstimationLedger, registry, hub) -> None:
        self.ledger = ledger
        self.registry = registry
        self.hub = hub
        self.task: str = ''
        self.is_closed: bool = False

    @property
    def state(self) -> str:
        if not self.task:
            return EMPTY
        return CLOSED if self.is_closed else OPEN

    def start(self, task: str) -> None:
        self.clear()
        self.task = task
        self.is_closed = False
        self.hub.publish_all('isClosed', False)
        self.hub.publish_all('newRound', self.task)
        logger.info(f"[round-start] task={task!r}")

    def close(self) -> None:
        self.is_closed = True
        self.hub.publish_all('isClosed', True)
        logger.info(f"[round-close] task={self.task!r} estimates={len(self.ledger)}")

    def reveal(self) -> None:
        self.hub.publish_all('estimations', self.ledger.snapshot())
        logger.info(f"[round-reveal] task={self.task!r} estimates={len(self.ledger)}")

    def clear(self) -> None:
        self.task = ''
        self.is_closed = False
        self.ledger.clear()
        self.hub.publish_all('newRound', self.task)
        logger.info("[round-clear]")

    def submit(self, name: str, value) -> bool:
        """Record an estimate. Returns False when the round is closed."""
        if self.is_closed:
            logger.debug(f"[estimate-discarded] name={name!r} round closed")
            return False
        self.ledger.record(name, value)
        self.hub.publish_to(self.registry.host_topic, 'newEstimation', self.ledger.snapshot())
        self.hub.publish_all('intermediateEstimations', self.ledger.names())
        logger.info(f"[estimate] name={name!r} count={len(self.ledger)}")
        return True

    def snapshot(self):
        return self.ledger.snapshot()

    def task_view(self):
        return {'question': self.task, 'isClosed': self.is_closed}
