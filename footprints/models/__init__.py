"""Snapshot entities."""

from footprints.models.restaurant import Restaurant  # noqa: F401
from footprints.models.snapshot import Snapshot  # noqa: F401
from footprints.models.visit import Photo, Visit  # noqa: F401
