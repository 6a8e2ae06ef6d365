"""Schemas for snapshot loading."""

from pydantic import BaseModel


class SnapshotLoadSummary(BaseModel):
    model_config = {"frozen": True}

    loaded: int
    skipped: int
