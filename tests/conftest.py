"""Global pytest fixtures and folder marks for EXPECTGUARD."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.mail",
]

TESTS_ROOT = Path(__file__).parent.resolve()

#: Top-level test folder -> mark added to every item collected from it.
FOLDER_MARKS = {
    "unit": pytest.mark.unit,
    "integration": pytest.mark.integration,
    "functional": pytest.mark.functional,
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark each item after the folder it lives in, unless already marked."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        mark = FOLDER_MARKS.get(path.relative_to(TESTS_ROOT).parts[0])
        if mark is not None and item.get_closest_marker(mark.name) is None:
            item.add_marker(mark)
