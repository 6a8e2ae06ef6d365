"""Point-in-time snapshot of the visit store."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, model_validator

from footprints.models.restaurant import Restaurant
from footprints.models.visit import Visit


class Snapshot(BaseModel):
    """Immutable copy of every restaurant and its visits.

    Hosts build one of these after all I/O is done and hand it to the
    statistics engine. Tuples and frozen models keep it read-only.
    """

    model_config = {"frozen": True, "from_attributes": True}

    restaurants: tuple[Restaurant, ...] = ()
    taken_at: dt.datetime | None = None

    @model_validator(mode="after")
    def _visits_have_single_owner(self) -> "Snapshot":
        owners: dict[str, str] = {}
        for restaurant in self.restaurants:
            for visit in restaurant.visits:
                if visit.id in owners:
                    raise ValueError(
                        f"visit {visit.id!r} appears twice "
                        f"(restaurants {owners[visit.id]!r} and {restaurant.id!r})"
                    )
                owners[visit.id] = restaurant.id
        return self

    def all_visits(self) -> list[Visit]:
        """Visits flattened across restaurants, in restaurant order."""
        return [visit for restaurant in self.restaurants for visit in restaurant.visits]
