"""Visit model."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field, TypeAdapter, field_validator

_DATETIME = TypeAdapter(dt.datetime)


class Photo(BaseModel):
    """Photo attached to a visit. Only counted by statistics."""

    model_config = {"frozen": True, "from_attributes": True}

    id: str
    caption: str | None = None


class Visit(BaseModel):
    """A single visit (review) of a restaurant."""

    model_config = {"frozen": True, "from_attributes": True}

    id: str
    date: dt.date
    rating: float = Field(..., allow_inf_nan=False, description="평점 (보통 0-5)")
    review: str = ""
    photos: tuple[Photo, ...] = ()
    companions: tuple[str, ...] = ()

    @field_validator("date", mode="before")
    @classmethod
    def _truncate_to_date(cls, value: object) -> object:
        # 방문 시각은 집계에 쓰지 않으므로 날짜만 남긴다
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, str) and len(value.strip()) > len("YYYY-MM-DD"):
            return _DATETIME.validate_python(value.strip()).date()
        return value

    @property
    def photo_count(self) -> int:
        return len(self.photos)
