from sqlalchemy import Boolean, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

SYSTEM_CONFIG_ID = 1


class SystemConfig(Base):
    """Single-row table of switches shared with every connected client."""

    __tablename__ = "configs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    login_not_cmu: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
