"""Database models."""

from app.models.counter import Counter
from app.models.queue import Queue, QueueStatus
from app.models.system_config import SYSTEM_CONFIG_ID, SystemConfig
from app.models.topic import Topic
from app.models.user import User

__all__ = [
    "Counter",
    "Queue",
    "QueueStatus",
    "SYSTEM_CONFIG_ID",
    "SystemConfig",
    "Topic",
    "User",
]
