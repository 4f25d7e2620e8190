"""Exception hierarchy shared by the expectguard test helpers."""


class ExpectGuardError(Exception):
    """Base class for expectguard errors."""


class UsageError(ExpectGuardError):
    """A guard was used incorrectly by the test author.

    Raised immediately (never recorded as a soft check): asserting before
    arming, malformed email expectations, invalid counts, or a host test case
    that does not provide what a mixin requires.
    """
