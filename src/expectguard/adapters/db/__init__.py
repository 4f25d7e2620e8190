"""Database adapters: engine factory and the per-engine query debug hook."""

from .debug import QueryDebug, QueryDebugCallback, query_debug
from .engine import make_engine

__all__ = [
    "QueryDebug",
    "QueryDebugCallback",
    "make_engine",
    "query_debug",
]
