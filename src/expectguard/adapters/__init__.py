"""Adapters (infrastructure) for EXPECTGUARD.

Concrete collaborators the guards instrument: the SQLAlchemy engine factory
and query debug hook, and the mail sender with its transports.

Dependency rule: may import `expectguard.interfaces`; the interfaces must not
import this package.
"""
