"""Mail sender with an environment-selected default transport.

`MailSender` builds its default transport lazily from the environment
(``EMAIL_SENDER_TRANSPORT`` and ``EMAIL_SENDER_TRANSPORT_<arg>``) and caches
it, so every send in a process shares one transport object. That cache is
what makes the in-memory `TestTransport` useful: code under test calls
`send()`, the test reads the same transport's deliveries afterwards.

Because the cache outlives a single test, test harnesses must call
`reset_default_transport()` whenever they change the environment selection.
"""

from __future__ import annotations

import logging
from email.message import EmailMessage

from expectguard import config
from expectguard.interfaces.transport import (
    AbstractTransport,
    Delivery,
    TransportConfigError,
    UnknownTransportError,
)

from .memory import TestTransport
from .smtp import SMTPTransport

logger = logging.getLogger(__name__)

_TRANSPORTS: dict[str, type[AbstractTransport]] = {
    config.TEST_TRANSPORT_NAME: TestTransport,
    "SMTP": SMTPTransport,
}


def register_transport(name: str, transport_cls: type[AbstractTransport]) -> None:
    """Make ``transport_cls`` selectable as ``EMAIL_SENDER_TRANSPORT=name``."""
    _TRANSPORTS[name] = transport_cls


def transport_from_name(name: str, **kwargs: object) -> AbstractTransport:
    """Instantiate the transport registered under ``name``.

    Raises:
        UnknownTransportError: If ``name`` is not registered.
    """
    try:
        transport_cls = _TRANSPORTS[name]
    except KeyError as e:
        raise UnknownTransportError(
            f"Unknown mail transport {name!r}; known: {sorted(_TRANSPORTS)}"
        ) from e
    try:
        return transport_cls(**kwargs)
    except TypeError as e:
        raise TransportConfigError(f"Invalid arguments for {name} transport: {e}") from e


class MailSender:
    """Sends messages through a lazily built, cached default transport."""

    def __init__(self) -> None:
        self._default: AbstractTransport | None = None

    @property
    def current_transport(self) -> AbstractTransport | None:
        """The cached default transport, or None if none has been built yet."""
        return self._default

    def default_transport(self) -> AbstractTransport:
        """Return the cached default transport, building it from the environment."""
        if self._default is None:
            name = config.get_transport_name() or config.DEFAULT_TRANSPORT_NAME
            self._default = transport_from_name(name, **config.get_transport_args())
            logger.debug("Default mail transport is %s", type(self._default).__name__)
        return self._default

    def reset_default_transport(self) -> None:
        """Drop the cached transport; the next send re-reads the environment."""
        self._default = None

    def send(
        self,
        message: EmailMessage,
        *,
        transport: AbstractTransport | None = None,
        sender: str | None = None,
        recipients: list[str] | tuple[str, ...] | None = None,
    ) -> Delivery:
        """Send ``message`` via ``transport`` or the default transport."""
        transport = transport or self.default_transport()
        return transport.send(message, sender=sender, recipients=recipients)


#: Process-wide sender used by `send()` and, by default, by `EmailMixin`.
default_sender = MailSender()


def send(message: EmailMessage, **kwargs) -> Delivery:
    """Send ``message`` with the process-wide `default_sender`."""
    return default_sender.send(message, **kwargs)
