"""Estimation session state.

One ``EstimationSession`` per Flask app holds the round, its ledger and the
host registry. Handlers reach it through ``get_session()`` and never keep
round state of their own, so each app (and each test) is isolated.
"""

import threading

from flask import current_app

from estimator.session.ledger import EstimationLedger
from estimator.session.registry import SubscriptionRegistry
from estimator.session.round import RoundStateMachine

EXTENSION_KEY = 'estimator'


class EstimationSession:
    def __init__(self, hub, takeover=False):
        self.hub = hub
        self.ledger = EstimationLedger()
        self.registry = SubscriptionRegistry(takeover=takeover)
        self.round = RoundStateMachine(self.ledger, self.registry, hub)
        # Serializes handlers so no two operations interleave
        self.lock = threading.RLock()


def get_session() -> EstimationSession:
    return current_app.extensions[EXTENSION_KEY]
