"""EXPECTGUARD test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with external systems (SQLite via SQLAlchemy).
- functional/   : Guarded test cases run end-to-end through a unittest runner.
- fixtures/     : Shared pytest fixtures (engines, mail environment, messages).
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Host test cases are built inside tests (see helpers/hosts.py) so pytest never
  collects them as tests of their own.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, integration, functional, property
"""
