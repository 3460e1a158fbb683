from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class User(Base):
    """Staff account, matched to the OAuth profile by email."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name_th: Mapped[Optional[str]] = mapped_column("firstname_th", String(100))
    last_name_th: Mapped[Optional[str]] = mapped_column("lastname_th", String(100))
    first_name_en: Mapped[Optional[str]] = mapped_column("firstname_en", String(100))
    last_name_en: Mapped[Optional[str]] = mapped_column("lastname_en", String(100))
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    counter_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("counters.id", ondelete="CASCADE")
    )

    def has_english_name(self) -> bool:
        return self.first_name_en is not None and self.last_name_en is not None
