import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class QueueStatus(str, enum.Enum):
    WAITING = "WAITING"
    IN_PROGRESS = "IN_PROGRESS"
    CALLED = "CALLED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Queue(Base):
    """A ticket. ``number`` is unique per topic, not globally."""

    __tablename__ = "queues"
    __table_args__ = (
        UniqueConstraint("topic_id", "no", name="uq_queues_topic_id_no"),
        Index("ix_queues_topic_id_created_at", "topic_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    number: Mapped[str] = mapped_column("no", String(20), nullable=False)
    student_id: Mapped[Optional[str]] = mapped_column(String(9))
    first_name: Mapped[str] = mapped_column("firstname", String(100), nullable=False)
    last_name: Mapped[str] = mapped_column("lastname", String(100), nullable=False)
    topic_id: Mapped[int] = mapped_column(
        ForeignKey("topics.id", ondelete="CASCADE"), nullable=False, index=True
    )
    note: Mapped[Optional[str]] = mapped_column(String(255))
    status: Mapped[QueueStatus] = mapped_column(
        Enum(QueueStatus, name="queue_status"),
        default=QueueStatus.WAITING,
        nullable=False,
    )
    counter_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("counters.id", ondelete="CASCADE")
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
