from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Topic(Base):
    __tablename__ = "topics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    topic_th: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    topic_en: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # Prefix of every ticket number issued for this topic
    code: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
