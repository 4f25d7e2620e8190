"""Configuration utilities for EXPECTGUARD.

All configuration comes from the process environment. The mail sender picks
its transport the way `Email::Sender`-style tooling does:

- ``EMAIL_SENDER_TRANSPORT`` names the transport (e.g. ``"Test"``, ``"SMTP"``).
- ``EMAIL_SENDER_TRANSPORT_<arg>`` entries become keyword arguments for it
  (e.g. ``EMAIL_SENDER_TRANSPORT_host=mail.local``).
"""

import os

TRANSPORT_ENV = "EMAIL_SENDER_TRANSPORT"  # pragma: no mutate
TRANSPORT_ARG_PREFIX = f"{TRANSPORT_ENV}_"  # pragma: no mutate
TEST_TRANSPORT_NAME = "Test"  # pragma: no mutate
DEFAULT_TRANSPORT_NAME = "SMTP"  # pragma: no mutate


def get_transport_name() -> str | None:
    """Get the transport name from the environment.

    Returns:
        The value of ``EMAIL_SENDER_TRANSPORT``, or None when unset or empty.
    """
    return os.environ.get(TRANSPORT_ENV) or None


def set_transport_name(name: str | None) -> None:
    """Set (or, for ``None``, remove) ``EMAIL_SENDER_TRANSPORT``."""
    if name is None:
        os.environ.pop(TRANSPORT_ENV, None)
    else:
        os.environ[TRANSPORT_ENV] = name


def get_transport_args() -> dict[str, str]:
    """Collect ``EMAIL_SENDER_TRANSPORT_<arg>`` variables as transport kwargs.

    The prefix is stripped and the remaining key lower-cased, so
    ``EMAIL_SENDER_TRANSPORT_HOST=mx`` yields ``{"host": "mx"}``.

    Returns:
        A mapping of argument name to raw string value.
    """
    return {
        key[len(TRANSPORT_ARG_PREFIX) :].lower(): value
        for key, value in os.environ.items()
        if key.startswith(TRANSPORT_ARG_PREFIX) and len(key) > len(TRANSPORT_ARG_PREFIX)
    }
