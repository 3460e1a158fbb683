from datetime import time

from sqlalchemy import Boolean, Integer, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Counter(Base):
    __tablename__ = "counters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    counter: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    time_closed: Mapped[time] = mapped_column(Time, default=time(16, 0), nullable=False)
