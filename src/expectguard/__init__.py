"""EXPECTGUARD

Test-case mixins that guard a test body: one counts the SQL queries a block
of code runs, the other captures the email it sends. Both follow the same
arm / capture / assert lifecycle and fail the test at teardown when an arm
was never asserted.
"""

from expectguard.errors import ExpectGuardError, UsageError

__all__ = ["ExpectGuardError", "UsageError", "__version__"]
__version__ = "0.1.0"
