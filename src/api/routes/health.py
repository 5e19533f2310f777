import structlog
from fastapi import APIRouter
from sqlalchemy import text

from src.api.schemas.health_schemas import HealthResponse
from src.config import settings
from src.infrastructure.database.connection import AsyncSessionLocal

logger = structlog.get_logger(__name__)
router = APIRouter(tags=["health"])


async def _database_status() -> str:
    try:
        async with AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
    except Exception as exc:
        logger.warning("health_database_unreachable", error=str(exc))
        return f"error: {exc}"
    return "connected"


def _image_storage_status() -> str:
    # Configuration only; the container itself is not contacted
    if settings.azure_storage_connection_string or settings.azure_storage_account_url:
        return "configured"
    return "not configured"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness check. Degraded when the database is unreachable or images cannot be stored."""
    database = await _database_status()
    image_storage = _image_storage_status()
    healthy = database == "connected" and image_storage == "configured"
    return HealthResponse(
        status="healthy" if healthy else "degraded",
        database=database,
        image_storage=image_storage,
    )
