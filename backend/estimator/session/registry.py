import logging
from typing import Optional

from estimator.exceptions import HostAlreadyAssigned, NotHost

logger = logging.getLogger(__name__)


class SubscriptionRegistry:
    """Tracks which connection holds the facilitator (host) role.

    The host is identified to the outside world by its topic string: targeted
    emissions go to that Socket.IO room and the polling facade compares the
    ``hostId`` query parameter against it.

    With ``takeover`` disabled (the default) a second connection cannot grab
    the role while a host is active; the host has to unsubscribe or drop.
    With ``takeover`` enabled the last subscriber wins and any unsubscribe
    resets the role.
    """

    def __init__(self, takeover: bool = False) -> None:
        self.takeover = takeover
        self.host_topic: str = ''
        self.host_sid: Optional[str] = None

    @property
    def has_host(self) -> bool:
        return bool(self.host_topic)

    def subscribe(self, sid: str, topic: str) -> Optional[str]:
        """Make ``topic`` the host id for connection ``sid``.

        Returns the sid of a displaced host (takeover mode only), else None.
        Raises HostAlreadyAssigned when another connection holds the role.
        """
        displaced = None
        if self.host_sid is not None and self.host_sid != sid:
            if not self.takeover:
                raise HostAlreadyAssigned(self.host_topic)
            displaced = self.host_sid
            logger.info(f"[host-takeover] topic={topic} displaced={displaced}")
        self.host_topic = topic
        self.host_sid = sid
        logger.info(f"[host-subscribe] topic={topic} sid={sid}")
        return displaced

    def topic_of(self, sid: str) -> str:
        """The host topic held by ``sid``, or '' when it is not the host."""
        return self.host_topic if sid is not None and sid == self.host_sid else ''

    def unsubscribe(self, sid: str, topic: str) -> str:
        """Reset the host role. Returns the topic ``sid`` held as host, or ''."""
        # Any topic resets the role, not only the one the host subscribed with.
        if not self.takeover and self.host_sid is not None and self.host_sid != sid:
            raise NotHost(f"Connection is not the current host (topic '{topic}')")
        previous = self.topic_of(sid)
        logger.info(f"[host-unsubscribe] previous={self.host_topic!r} sid={sid}")
        self._reset()
        return previous

    def release(self, sid: str) -> bool:
        """Drop the host role if ``sid`` holds it. Returns True when released."""
        if sid is None or sid != self.host_sid:
            return False
        logger.info(f"[host-release] topic={self.host_topic} sid={sid}")
        self._reset()
        return True

    def authorize(self, host_id: str) -> bool:
        return host_id == self.host_topic

    def _reset(self) -> None:
        self.host_topic = ''
        self.host_sid = None
