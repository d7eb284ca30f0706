"""Default marks for tests under `tests/unit/`."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

UNIT_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "unit"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark every item collected from `tests/unit/` as `unit`, unless already marked."""
    for item in items:
        if UNIT_ROOT not in item.path.resolve().parents:
            continue
        if item.get_closest_marker(MARKER_NAME) is None:
            item.add_marker(pytest.mark.unit)
