"""SMTP mail transport.

Sends through `smtplib`. Constructor arguments may arrive as strings (they
are usually read from ``EMAIL_SENDER_TRANSPORT_<arg>`` environment variables)
and are coerced here.
"""

from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage

from expectguard.interfaces.transport import (
    AbstractTransport,
    Delivery,
    DeliveryFailed,
    DeliveryFailure,
    TransportConfigError,
    envelope_for,
)

__all__ = ["SMTPTransport"]

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on", "ssl"}
_FALSE = {"", "0", "false", "no", "off"}
STARTTLS = "starttls"


def _coerce_int(name: str, value: int | str | None) -> int | None:
    if value is None or isinstance(value, int):
        return value
    try:
        return int(value)
    except ValueError as e:
        raise TransportConfigError(f"{name} must be an integer, got {value!r}") from e


def _coerce_ssl(value: bool | str) -> bool | str:
    if isinstance(value, bool):
        return value
    raw = value.strip().lower()
    if raw == STARTTLS:
        return STARTTLS
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise TransportConfigError(f"ssl must be a boolean or 'starttls', got {value!r}")


class SMTPTransport(AbstractTransport):
    """Deliver messages to an SMTP server."""

    def __init__(  # pylint: disable=too-many-arguments
        self,
        host: str = "localhost",
        port: int | str | None = None,
        ssl: bool | str = False,
        username: str | None = None,
        password: str | None = None,
        timeout: int | str = 60,
    ) -> None:
        self.host = host
        self.ssl = _coerce_ssl(ssl)
        self.port = _coerce_int("port", port) or (465 if self.ssl is True else 25)
        self.username = username
        self.password = password
        self.timeout = _coerce_int("timeout", timeout)

    def _connect(self) -> smtplib.SMTP:
        if self.ssl is True:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        smtp = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        if self.ssl == STARTTLS:
            smtp.starttls()
        return smtp

    def send(
        self,
        message: EmailMessage,
        *,
        sender: str | None = None,
        recipients: list[str] | tuple[str, ...] | None = None,
    ) -> Delivery:
        envelope = envelope_for(message, sender, recipients)
        try:
            with self._connect() as smtp:
                if self.username:
                    smtp.login(self.username, self.password or "")
                refused = smtp.send_message(
                    message,
                    from_addr=envelope.sender,
                    to_addrs=list(envelope.recipients),
                )
        except smtplib.SMTPRecipientsRefused as e:
            failures = tuple(
                DeliveryFailure(recipient=r, reason=f"{code} {reason!r}")
                for r, (code, reason) in e.recipients.items()
            )
            raise DeliveryFailed("all recipients were refused", failures) from e
        except (smtplib.SMTPException, OSError) as e:
            raise DeliveryFailed(f"SMTP delivery via {self.host}:{self.port} failed: {e}") from e

        failures = tuple(
            DeliveryFailure(recipient=r, reason=f"{code} {reason!r}")
            for r, (code, reason) in refused.items()
        )
        if failures:
            logger.warning("SMTP server refused %d recipient(s)", len(failures))
        return Delivery(
            message=message,
            envelope=envelope,
            successes=tuple(r for r in envelope.recipients if r not in refused),
            failures=failures,
        )
