import datetime as dt

import pytest

from footprints.models import Snapshot
from tests.factories import make_restaurant, make_visit


@pytest.fixture
def today():
    return dt.date(2024, 2, 20)


@pytest.fixture
def scenario_snapshot():
    """A: 2024-01-05 (5), 2024-02-10 (3). B: 2024-01-20 (4)."""
    return Snapshot(
        restaurants=(
            make_restaurant("A", [make_visit("2024-01-05", 5), make_visit("2024-02-10", 3)]),
            make_restaurant("B", [make_visit("2024-01-20", 4)], address="Hauptstr. 5\n80331 Munich\nGermany"),
        )
    )
