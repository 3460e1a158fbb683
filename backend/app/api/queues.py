from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.database import get_db
from app.schemas.queue import RegisterRequest, RegisterResponse, TicketResponse
from app.services.queue_service import QueueService
from app.utils.tokens import NameClaims, SessionTokenIssuer, get_token_issuer

router = APIRouter(prefix="/queues", tags=["Queues"])
settings = get_settings()


@router.post("/register", response_model=RegisterResponse)
async def register(
    body: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    issuer: Annotated[SessionTokenIssuer, Depends(get_token_issuer)],
) -> RegisterResponse:
    """Take a ticket without university login."""
    token = issuer.issue(NameClaims(body.first_name, body.last_name), visitor=True)

    queue_service = QueueService(db, max_retries=settings.ticket_max_retries)
    ticket = await queue_service.create_ticket(body)
    await db.commit()

    return RegisterResponse(token=token, ticket=TicketResponse.model_validate(ticket))
