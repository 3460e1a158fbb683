import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import PersistenceError
from app.models.system_config import SYSTEM_CONFIG_ID, SystemConfig

logger = logging.getLogger(__name__)


class ConfigService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self) -> Optional[SystemConfig]:
        try:
            result = await self.db.execute(
                select(SystemConfig).where(SystemConfig.id == SYSTEM_CONFIG_ID)
            )
        except SQLAlchemyError as e:
            logger.error("Config lookup failed: %s", e)
            raise PersistenceError("Failed to retrieve config") from None
        return result.scalar_one_or_none()

    async def set_login_not_cmu(self, enabled: bool) -> SystemConfig:
        config = await self.get()
        if config is None:
            config = SystemConfig(id=SYSTEM_CONFIG_ID, login_not_cmu=enabled)
            self.db.add(config)
        else:
            config.login_not_cmu = enabled
        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error("Config update failed: %s", e)
            raise PersistenceError("Failed to update config") from None
        return config
