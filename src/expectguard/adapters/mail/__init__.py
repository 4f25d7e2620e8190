"""Mail adapters: transports, the transport registry and the default sender."""

from .memory import TestTransport
from .sender import (
    MailSender,
    default_sender,
    register_transport,
    send,
    transport_from_name,
)
from .smtp import SMTPTransport

__all__ = [
    "MailSender",
    "SMTPTransport",
    "TestTransport",
    "default_sender",
    "register_transport",
    "send",
    "transport_from_name",
]
