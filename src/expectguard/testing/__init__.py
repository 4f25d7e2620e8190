"""Test-case mixins: the SQL-count guard, the email guard and soft checks.

Dependency rule: may import `expectguard.adapters` and
`expectguard.interfaces`; nothing outside tests imports this package.
"""

from .checks import CheckReporter, CheckResult, GuardedTestCase
from .emails import EmailMixin
from .expectations import Exact, ExpectedEmail, Match, normalize_newlines
from .sql_count import SQLCountMixin

__all__ = [
    "CheckReporter",
    "CheckResult",
    "EmailMixin",
    "Exact",
    "ExpectedEmail",
    "GuardedTestCase",
    "Match",
    "SQLCountMixin",
    "normalize_newlines",
]
