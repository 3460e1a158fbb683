from typing import Annotated, Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.exceptions import PersistenceError
from app.services.config_service import ConfigService

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(db: Annotated[AsyncSession, Depends(get_db)]) -> dict[str, Any]:
    """Ready once the database answers and the system config row is seeded."""
    checks = {"database": "unhealthy", "config": "unknown"}

    try:
        config = await ConfigService(db).get()
    except PersistenceError as e:
        checks["database"] = f"unhealthy: {e.message}"
    else:
        checks["database"] = "healthy"
        checks["config"] = "healthy" if config is not None else "missing"

    overall = "healthy" if all(v == "healthy" for v in checks.values()) else "unhealthy"
    return {"status": overall, "checks": checks}
