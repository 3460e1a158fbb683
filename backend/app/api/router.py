from fastapi import APIRouter

from app.api.auth import router as auth_router
from app.api.config import router as config_router
from app.api.health import router as health_router
from app.api.queues import router as queues_router
from app.api.topics import router as topics_router

api_router = APIRouter()

# Include sub-routers
api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router)
api_router.include_router(queues_router)
api_router.include_router(topics_router)
api_router.include_router(config_router)
