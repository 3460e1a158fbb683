from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.topic import TopicResponse
from app.services.queue_service import QueueService

router = APIRouter(prefix="/topics", tags=["Topics"])


@router.get("", response_model=list[TopicResponse])
async def list_topics(db: Annotated[AsyncSession, Depends(get_db)]) -> list[TopicResponse]:
    topics = await QueueService(db).list_topics()
    return [TopicResponse.model_validate(t) for t in topics]
