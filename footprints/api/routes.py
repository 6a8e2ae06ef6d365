"""Root API router."""

from fastapi import APIRouter

from footprints.api.endpoints import statistics

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "ok"}


router.include_router(statistics.router)
