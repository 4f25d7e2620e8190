"""Interfaces (application boundary) for EXPECTGUARD.

Defines framework-free contracts and small DTOs shared by the adapters and the
testing mixins (e.g., the mail transport port and its delivery records).

Dependency rule: this package is independent; do not import from any other
`expectguard.*` modules.
"""
