"""Expected-email values and their normalization.

Each field of an expected email is either an exact value or a pattern:

- `Exact` wraps a literal string, compared with ``==``.
- `Match` wraps a compiled regular expression, applied with ``re.search``.

Literal bodies (``text``/``html``) are normalized to CRLF line endings, the
form mail bodies take on the wire, so expectations written with ``\\n`` work
on every platform. Literal subjects are stripped of surrounding whitespace.
Patterns are never modified.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from typing import Any, TypeAlias

from expectguard.errors import UsageError

_NEWLINE = re.compile(r"\r?\n")
CRLF = "\r\n"


def normalize_newlines(text: str) -> str:
    """Convert ``\\n`` and ``\\r\\n`` line endings to ``\\r\\n`` (idempotent)."""
    return _NEWLINE.sub(CRLF, text)


@dataclass(frozen=True, slots=True)
class Exact:
    """A field that must equal ``value``."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Match:
    """A field that must contain a match for ``pattern``."""

    pattern: re.Pattern[str]

    def __str__(self) -> str:
        return self.pattern.pattern


Expectation: TypeAlias = Exact | Match


def to_expectation(
    field_name: str, value: Any, normalize: Callable[[str], str] | None = None
) -> Expectation:
    """Wrap a raw field value as `Exact` or `Match`.

    Args:
        field_name: Field being converted (for error messages).
        value: A string, a compiled pattern, or an existing expectation.
        normalize: Applied to literal strings only.

    Raises:
        UsageError: If ``value`` is none of the accepted types.
    """
    if isinstance(value, Exact):
        value = value.value
    if isinstance(value, Match):
        return value
    if isinstance(value, re.Pattern):
        return Match(value)
    if isinstance(value, str):
        return Exact(normalize(value) if normalize else value)
    raise UsageError(
        f"{field_name} must be a string or a compiled pattern, got {type(value).__name__}"
    )


@dataclass(frozen=True, slots=True)
class ExpectedEmail:
    """One email the code under test is expected to send.

    Raw strings and compiled patterns are accepted for every field and are
    normalized on construction.

    Raises:
        UsageError: If none of ``to``/``html``/``text`` is given, or if
            ``name`` is empty.
    """

    name: str
    to: Expectation | None = None
    subject: Expectation | None = None
    html: Expectation | None = None
    text: Expectation | None = None

    def __post_init__(self) -> None:
        if self.to is None and self.html is None and self.text is None:
            raise UsageError("One of 'to', 'html' or 'text' fields must be specified")
        if not self.name:
            raise UsageError("name must be specified")

        def _set(attr: str, value: Any) -> None:
            object.__setattr__(self, attr, value)

        if self.to is not None:
            _set("to", to_expectation("to", self.to))
        for body in ("html", "text"):
            value = getattr(self, body)
            if value is not None:
                _set(body, to_expectation(body, value, normalize_newlines))
        # an empty literal subject means "don't check the subject"
        if self.subject is not None and not (isinstance(self.subject, str) and not self.subject):
            _set("subject", to_expectation("subject", self.subject, str.strip))
        else:
            _set("subject", None)

    @classmethod
    def from_mapping(cls, entry: Mapping[str, Any]) -> ExpectedEmail:
        """Build an expectation from a plain mapping such as a dict literal.

        Raises:
            UsageError: On unknown keys or invalid field values.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(entry) - known
        if unknown:
            raise UsageError(f"Unknown email field(s): {', '.join(sorted(unknown))}")
        return cls(
            name=entry.get("name", ""),
            to=entry.get("to"),
            subject=entry.get("subject"),
            html=entry.get("html"),
            text=entry.get("text"),
        )
