"""Per-engine query debug hook.

SQLAlchemy exposes statement execution through events rather than a single
"debug" switch, so this module provides one: every engine gets (at most) one
`QueryDebug` object with a read/write ``debug`` flag and a read/write
``callback``. A single ``before_cursor_execute`` listener is installed per
engine and dispatches to whatever callback is current.

Save/restore of instrumentation is therefore just reading and writing two
attributes, independent of event-listener ordering:

    hook = query_debug(engine)
    saved = (hook.debug, hook.callback)
    hook.debug, hook.callback = True, my_callback
    ...
    hook.debug, hook.callback = saved

When ``debug`` is on and no callback is installed, statements are logged at
DEBUG level instead.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeAlias

from sqlalchemy import event

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)

#: Called as ``callback(operation, info)`` for every executed statement.
QueryDebugCallback: TypeAlias = Callable[[str, str], None]

_HOOKS: weakref.WeakKeyDictionary[Engine, QueryDebug] = weakref.WeakKeyDictionary()


def statement_operation(statement: str) -> str:
    """Return the upper-cased leading keyword of ``statement`` (e.g. ``"SELECT"``)."""
    parts = statement.split(None, 1)
    return parts[0].upper() if parts else ""


def statement_info(statement: str, parameters: Any) -> str:
    """Render a statement and its bound parameters as one diagnostic line."""
    if not parameters:
        return statement
    return f"{statement}: {parameters!r}"


class QueryDebug:
    """Debug flag plus callback slot for a single engine.

    Holds no reference to the engine itself; the engine owns the listener,
    and the module registry holds engines weakly.
    """

    def __init__(self) -> None:
        self.debug: bool = False
        self.callback: QueryDebugCallback | None = None

    def state(self) -> tuple[bool, QueryDebugCallback | None]:
        """Return the current ``(debug, callback)`` pair for later `restore`."""
        return self.debug, self.callback

    def restore(self, state: tuple[bool, QueryDebugCallback | None]) -> None:
        """Put back a pair previously returned by `state`."""
        self.debug, self.callback = state

    def _before_cursor_execute(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        conn: Connection,  # pylint: disable=unused-argument
        cursor: Any,  # pylint: disable=unused-argument
        statement: str,
        parameters: Any,
        context: Any,  # pylint: disable=unused-argument
        executemany: bool,  # pylint: disable=unused-argument
    ) -> None:
        if not self.debug:
            return
        info = statement_info(statement, parameters)
        if self.callback is None:
            logger.debug("%s", info)
            return
        self.callback(statement_operation(statement), info)


def query_debug(engine: Engine) -> QueryDebug:
    """Return the debug hook for ``engine``, installing it on first use.

    Args:
        engine: The SQLAlchemy engine to instrument.

    Returns:
        QueryDebug: The engine's (shared, process-wide) debug hook.
    """
    hook = _HOOKS.get(engine)
    if hook is None:
        hook = QueryDebug()
        event.listen(engine, "before_cursor_execute", hook._before_cursor_execute)  # pylint: disable=protected-access
        _HOOKS[engine] = hook
        logger.debug("Installed query debug hook on %s", engine.url.render_as_string())
    return hook
