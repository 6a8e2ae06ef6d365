"""FastAPI application entry point."""

from dotenv import load_dotenv

from fastapi import FastAPI

# Load environment variables from .env file
load_dotenv()

from footprints.api.routes import router  # noqa: E402
from footprints.core.config import settings  # noqa: E402
from footprints.core.logging import configure_logging  # noqa: E402

configure_logging(settings.log_level)

app = FastAPI(title=settings.project_name)
app.include_router(router, prefix=settings.api_v1_prefix)


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Basic sanity endpoint."""
    return {"message": "Foodie Footprints Statistics API is running"}


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    """Health check endpoint for Docker."""
    return {"status": "healthy"}
