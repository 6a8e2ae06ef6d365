"""Restaurant model."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel

from footprints.models.visit import Visit


class Restaurant(BaseModel):
    """Restaurant together with the visits it owns."""

    model_config = {"frozen": True, "from_attributes": True}

    id: str
    name: str
    address: str = ""
    latitude: float
    longitude: float
    website: str | None = None
    visits: tuple[Visit, ...] = ()
    created_at: dt.datetime | None = None

    @property
    def coordinate(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)

    @property
    def average_rating(self) -> float:
        """Mean rating over all visits, 0 when there are none."""
        if not self.visits:
            return 0.0
        return sum(visit.rating for visit in self.visits) / len(self.visits)

    @property
    def formatted_address(self) -> str:
        """Street, "postcode city" and country lines, dropping anything else."""
        parts = self.address.split("\n")
        components = [parts[0]] if parts else []

        postcode_and_city = next(
            (part for part in parts[1:] if " " in part and part[:1].isdigit()),
            None,
        )
        if postcode_and_city is not None:
            components.append(postcode_and_city)

        # 마지막 줄은 보통 국가
        country = parts[-1]
        if len(parts) > 1 and country != postcode_and_city:
            components.append(country)

        return "\n".join(components)
