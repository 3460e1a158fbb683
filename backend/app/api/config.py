import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.system_config import LoginNotCmuUpdate, MessageResponse, SystemConfigResponse
from app.services.broadcast_service import BroadcastHub, get_broadcast_hub
from app.services.config_service import ConfigService
from app.utils.auth import CurrentStaff

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/config", tags=["Config"])

LOGIN_NOT_CMU_EVENT = "setLoginNotCmu"


@router.get("", response_model=SystemConfigResponse)
async def get_config(db: Annotated[AsyncSession, Depends(get_db)]) -> SystemConfigResponse:
    config = await ConfigService(db).get()
    if config is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Config not found",
        )
    return SystemConfigResponse.model_validate(config)


@router.put("/login-not-cmu", response_model=MessageResponse)
async def set_login_not_cmu(
    body: LoginNotCmuUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    hub: Annotated[BroadcastHub, Depends(get_broadcast_hub)],
    current_staff: CurrentStaff,
) -> MessageResponse:
    await ConfigService(db).set_login_not_cmu(body.login_not_cmu)
    await db.commit()
    logger.info("loginNotCmu set to %s by %s", body.login_not_cmu, current_staff.email)

    await hub.publish(LOGIN_NOT_CMU_EVENT, body.login_not_cmu)
    return MessageResponse(message="Config updated successfully")
