"""Schemas for inbound Socket.IO events.

Each event name maps to one frozen dataclass. ``parse_event`` validates the
raw payload and raises ``InvalidPayload`` instead of letting a malformed
value reach the ledger.
"""

import math
from dataclasses import dataclass
from typing import Any, Union

from estimator.exceptions import InvalidPayload


@dataclass(frozen=True)
class Subscribe:
    topic: str


@dataclass(frozen=True)
class Unsubscribe:
    topic: str


@dataclass(frozen=True)
class NewRound:
    task: str


@dataclass(frozen=True)
class CloseRound:
    pass


@dataclass(frozen=True)
class RevealResult:
    pass


@dataclass(frozen=True)
class ClearRound:
    pass


@dataclass(frozen=True)
class AddEstimation:
    name: str
    estimation: Union[int, float]


InboundEvent = Union[Subscribe, Unsubscribe, NewRound, CloseRound,
                     RevealResult, ClearRound, AddEstimation]


def _topic(event: str, data: Any) -> str:
    if not isinstance(data, str) or not data:
        raise InvalidPayload(event, 'topic must be a non-empty string')
    return data


def _parse_subscribe(data):
    return Subscribe(topic=_topic('subscribe', data))


def _parse_unsubscribe(data):
    return Unsubscribe(topic=_topic('unsubscribe', data))


def _parse_new_round(data):
    if not isinstance(data, str):
        raise InvalidPayload('newRound', 'task must be a string')
    return NewRound(task=data)


def _parse_add_estimation(data):
    if not isinstance(data, dict):
        raise InvalidPayload('addEstimation', 'payload must be an object')
    name = data.get('name')
    value = data.get('estimation')
    if not isinstance(name, str) or not name.strip():
        raise InvalidPayload('addEstimation', 'name must be a non-empty string')
    # bool is an int subclass but never a valid estimate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidPayload('addEstimation', 'estimation must be a number')
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidPayload('addEstimation', 'estimation must be finite')
    return AddEstimation(name=name, estimation=value)


_PARSERS = {
    'subscribe': _parse_subscribe,
    'unsubscribe': _parse_unsubscribe,
    'newRound': _parse_new_round,
    'closeRound': lambda data: CloseRound(),
    'revealResult': lambda data: RevealResult(),
    'clearRound': lambda data: ClearRound(),
    'addEstimation': _parse_add_estimation,
}


def parse_event(event: str, data: Any = None) -> InboundEvent:
    try:
        parser = _PARSERS[event]
    except KeyError:
        raise InvalidPayload(event, 'unknown event') from None
    return parser(data)
