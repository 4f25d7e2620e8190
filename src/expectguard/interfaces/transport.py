"""Mail transport interface for EXPECTGUARD.

This module defines:
- The `Delivery` and `DeliveryFailure` DTOs describing what a transport did
  with one message.
- The `AbstractTransport` port (framework-free ABC) for sending messages.
- A small exception hierarchy for mail errors.

Contract overview
-----------------
Send:
- `send(message, sender=None, recipients=None)` delivers one
  `email.message.EmailMessage`.
- The envelope defaults to the message headers: ``From`` for the sender and
  ``To``/``Cc``/``Bcc`` for the recipients. No recipients -> `MailError`.
- Per-recipient rejections that still leave at least one accepted recipient
  are reported in `Delivery.failures`; if every recipient fails the transport
  raises `DeliveryFailed`.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from email.message import EmailMessage
from email.utils import getaddresses


class MailError(Exception):
    """Base class for mail sending errors."""


class DeliveryFailed(MailError):
    """The message could not be delivered to any recipient."""

    def __init__(self, message: str, failures: tuple[DeliveryFailure, ...] = ()) -> None:
        super().__init__(message)
        self.failures = failures


class UnknownTransportError(MailError):
    """No transport is registered under the requested name."""


class TransportConfigError(MailError):
    """Transport arguments (e.g. from the environment) are invalid."""


@dataclass(frozen=True, slots=True)
class Envelope:
    """SMTP envelope for one delivery."""

    sender: str | None
    recipients: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class DeliveryFailure:
    """A recipient the transport could not deliver to."""

    recipient: str
    reason: str


@dataclass(frozen=True, slots=True)
class Delivery:
    """What a transport did with one message.

    Attributes:
        message: The message as delivered.
        envelope: Envelope sender and recipients used.
        successes: Recipients that accepted the message.
        failures: Recipients that rejected it (partial failure only).
    """

    message: EmailMessage
    envelope: Envelope
    successes: tuple[str, ...] = ()
    failures: tuple[DeliveryFailure, ...] = field(default=())


def envelope_for(
    message: EmailMessage,
    sender: str | None = None,
    recipients: list[str] | tuple[str, ...] | None = None,
) -> Envelope:
    """Build an envelope, filling missing parts from the message headers.

    Raises:
        MailError: If no recipient can be determined.
    """
    if sender is None and message["From"] is not None:
        addresses = getaddresses([str(message["From"])])
        sender = addresses[0][1] if addresses else None
    if recipients is None:
        headers = [str(v) for name in ("To", "Cc", "Bcc") for v in message.get_all(name, [])]
        recipients = [addr for _, addr in getaddresses(headers) if addr]
    if not recipients:
        raise MailError("no recipients")
    return Envelope(sender=sender, recipients=tuple(recipients))


class AbstractTransport(abc.ABC):
    """Contract for something that can deliver email messages."""

    @abc.abstractmethod
    def send(
        self,
        message: EmailMessage,
        *,
        sender: str | None = None,
        recipients: list[str] | tuple[str, ...] | None = None,
    ) -> Delivery:
        """Deliver ``message``.

        Args:
            message: The message to send.
            sender: Envelope sender; defaults to the ``From`` header.
            recipients: Envelope recipients; default to ``To``/``Cc``/``Bcc``.

        Returns:
            Delivery: The outcome, including any partial failures.

        Raises:
            MailError: No recipients could be determined.
            DeliveryFailed: Every recipient failed.
        """
