import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import PersistenceError
from app.models.user import User
from app.utils.oauth import OAuthProfile

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: str) -> Optional[User]:
        try:
            result = await self.db.execute(select(User).where(User.email == email))
        except SQLAlchemyError as e:
            logger.error("User lookup for %s failed: %s", email, e)
            raise PersistenceError("Failed to retrieve user") from None
        return result.scalar_one_or_none()

    async def backfill_names(self, user: User, profile: OAuthProfile) -> User:
        """Copy the provider's Thai and English names onto a user created without them."""
        user.first_name_th = profile.first_name_th
        user.last_name_th = profile.last_name_th
        user.first_name_en = profile.first_name_en
        user.last_name_en = profile.last_name_en
        try:
            await self.db.flush()
            await self.db.refresh(user)
        except SQLAlchemyError as e:
            logger.error("Name backfill for %s failed: %s", user.email, e)
            raise PersistenceError("Failed to update user data") from None
        return user
