"""In-memory mail transport for tests.

`TestTransport` never talks to a server; it records every message it is
asked to send as a `Delivery`, in send order, so a test can inspect what the
code under test would have sent.

Key behaviors
-------------
- **Snapshot capture**: each message is serialized to its wire form and parsed
  back, so later mutation of the caller's message object is not observed and
  the stored copy looks exactly like what a real server would have received.
- **Simulated rejections**: ``failing_recipients`` makes the transport reject
  the listed addresses. A partial rejection is recorded in
  `Delivery.failures`; a total rejection raises `DeliveryFailed` and records
  nothing.
- **Thread-safety**: the delivery list is guarded by a lock so threaded code
  under test can send.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from email import policy
from email.message import EmailMessage
from email.parser import BytesParser

from expectguard.interfaces.transport import (
    AbstractTransport,
    Delivery,
    DeliveryFailed,
    DeliveryFailure,
    envelope_for,
)

__all__ = ["TestTransport"]

logger = logging.getLogger(__name__)


def _parse_recipient_list(value: str | Iterable[str] | None) -> frozenset[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        value = value.split(",")
    return frozenset(v.strip().lower() for v in value if v.strip())


def snapshot(message: EmailMessage) -> EmailMessage:
    """Return an independent copy of ``message`` as parsed from its wire form."""
    wire = message.as_bytes(policy=policy.SMTP)
    parsed = BytesParser(policy=policy.default).parsebytes(wire)
    assert isinstance(parsed, EmailMessage)
    return parsed


class TestTransport(AbstractTransport):
    """Transport that stores deliveries in memory instead of sending them."""

    __test__ = False  # not a pytest test class

    def __init__(self, failing_recipients: str | Iterable[str] | None = None) -> None:
        self._deliveries: list[Delivery] = []
        self._failing = _parse_recipient_list(failing_recipients)
        self._lock = threading.Lock()

    @property
    def deliveries(self) -> list[Delivery]:
        """Captured deliveries in send order (a copy)."""
        with self._lock:
            return list(self._deliveries)

    def clear_deliveries(self) -> None:
        """Forget every captured delivery."""
        with self._lock:
            self._deliveries.clear()

    def send(
        self,
        message: EmailMessage,
        *,
        sender: str | None = None,
        recipients: list[str] | tuple[str, ...] | None = None,
    ) -> Delivery:
        envelope = envelope_for(message, sender, recipients)
        failures = tuple(
            DeliveryFailure(recipient=r, reason="recipient rejected by test transport")
            for r in envelope.recipients
            if r.lower() in self._failing
        )
        successes = tuple(r for r in envelope.recipients if r.lower() not in self._failing)
        if not successes:
            raise DeliveryFailed("all recipients were rejected", failures)

        delivery = Delivery(
            message=snapshot(message),
            envelope=envelope,
            successes=successes,
            failures=failures,
        )
        with self._lock:
            self._deliveries.append(delivery)
        logger.debug(
            "Captured email %r to %s", message["Subject"], ", ".join(envelope.recipients)
        )
        return delivery
