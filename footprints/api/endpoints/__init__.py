"""Expose API endpoint routers."""

from footprints.api.endpoints import statistics

__all__ = ["statistics"]
