import datetime as dt
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from footprints.models import Restaurant, Snapshot, Visit
from tests.factories import make_restaurant, make_visit


def test_visit_date_drops_time_of_day():
    assert Visit(id="v", date="2024-01-05T23:30:00", rating=4).date == dt.date(2024, 1, 5)
    assert Visit(id="v", date="2024-01-05 10:00:00", rating=4).date == dt.date(2024, 1, 5)
    assert Visit(id="v", date="2024-01-05T10:00:00Z", rating=4).date == dt.date(2024, 1, 5)
    assert Visit(id="v", date="2024-01-05", rating=4).date == dt.date(2024, 1, 5)
    assert Visit(id="v", date=dt.datetime(2024, 1, 5, 8, 0), rating=4).date == dt.date(2024, 1, 5)


def test_visit_rejects_unparseable_date():
    with pytest.raises(ValidationError):
        Visit(id="v", date="2024-01-05 at noon", rating=4)


def test_visit_rejects_nan_rating():
    with pytest.raises(ValidationError):
        Visit(id="v", date="2024-01-05", rating=float("nan"))


def test_snapshot_is_immutable():
    snapshot = Snapshot(restaurants=[make_restaurant("A", [make_visit("2024-01-05")])])

    assert isinstance(snapshot.restaurants, tuple)
    assert isinstance(snapshot.restaurants[0].visits, tuple)
    with pytest.raises(ValidationError):
        snapshot.restaurants[0].name = "B"


def test_visit_belongs_to_one_restaurant():
    shared = make_visit("2024-01-05", visit_id="shared")
    with pytest.raises(ValidationError):
        Snapshot(restaurants=(make_restaurant("A", [shared]), make_restaurant("B", [shared])))
    with pytest.raises(ValidationError):
        Snapshot(restaurants=(make_restaurant("A", [shared, shared]),))


def test_restaurant_derived_values():
    restaurant = make_restaurant("A", [make_visit("2024-01-05", 5, photos=2), make_visit("2024-01-06", 2)])

    assert restaurant.average_rating == pytest.approx(3.5)
    assert restaurant.coordinate == (52.52, 13.405)
    assert make_restaurant("Empty").average_rating == 0.0


def test_snapshot_from_attributes():
    row = SimpleNamespace(
        id="r1",
        name="Attribute Bistro",
        address="1 Main St\n10115 Berlin",
        latitude=1.0,
        longitude=2.0,
        website=None,
        created_at=dt.datetime(2024, 1, 1),
        visits=[SimpleNamespace(id="v1", date=dt.date(2024, 1, 2), rating=4.5, review="", photos=[], companions=[])],
    )
    snapshot = Snapshot.model_validate(SimpleNamespace(restaurants=[row], taken_at=None), from_attributes=True)

    assert isinstance(snapshot.restaurants[0], Restaurant)
    assert [visit.id for visit in snapshot.all_visits()] == ["v1"]
