"""Engine factory for code guarded by `SQLCountMixin`.

Any SQLAlchemy Engine works with the guards; `make_engine` only saves the
caller from installing the query debug hook separately.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine

from .debug import query_debug

if TYPE_CHECKING:
    from sqlalchemy.engine import URL, Engine


def make_engine(url: str | URL, *, echo: bool = False, debug: bool = False) -> Engine:
    """Create an Engine with its query debug hook already installed.

    Args:
        url: Database connection URL (str or :class:`URL`).
        echo: Passed through to :func:`sqlalchemy.create_engine`.
        debug: Whether the hook reports statements from the start.

    Returns:
        Engine: The new engine.
    """
    engine = create_engine(url, echo=echo)
    query_debug(engine).debug = debug
    return engine
