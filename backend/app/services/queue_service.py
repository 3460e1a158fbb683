import logging
import re
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, PersistenceError
from app.models.queue import Queue
from app.models.topic import Topic
from app.schemas.queue import RegisterRequest

logger = logging.getLogger(__name__)

TICKET_DIGITS = 3
_SEQUENCE_RE = re.compile(r"[0-9]+")


def next_ticket_number(code: str, last_number: Optional[str]) -> str:
    """
    Render the ticket number following ``last_number`` for a topic.

    ``A007`` -> ``A008``; no previous ticket -> ``A001``. Sequences keep
    growing past 999 rather than wrapping.
    """
    if last_number is None:
        return f"{code}{1:0{TICKET_DIGITS}d}"

    suffix = last_number[len(code):] if last_number.startswith(code) else ""
    if not _SEQUENCE_RE.fullmatch(suffix):
        raise PersistenceError("Failed to parse the last queue number")
    return f"{code}{int(suffix) + 1:0{TICKET_DIGITS}d}"


class QueueService:
    def __init__(self, db: AsyncSession, max_retries: int = 3):
        self.db = db
        self.max_retries = max_retries

    async def list_topics(self) -> list[Topic]:
        try:
            result = await self.db.execute(select(Topic).order_by(Topic.id))
        except SQLAlchemyError as e:
            logger.error("Topic listing failed: %s", e)
            raise PersistenceError("Failed to retrieve topics") from None
        return list(result.scalars().all())

    async def _get_topic(self, topic_id: int) -> Topic:
        # Row lock serializes registrations for the same topic on PostgreSQL
        result = await self.db.execute(
            select(Topic).where(Topic.id == topic_id).with_for_update()
        )
        topic = result.scalar_one_or_none()
        if topic is None:
            raise PersistenceError("Failed to retrieve topic code")
        return topic

    async def _latest_number(self, topic_id: int) -> Optional[str]:
        # Ids are allocated under the topic lock; created_at is the transaction start
        result = await self.db.execute(
            select(Queue.number)
            .where(Queue.topic_id == topic_id)
            .order_by(Queue.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def create_ticket(self, data: RegisterRequest) -> Queue:
        """
        Insert the next ticket for ``data.topic_id``.

        A duplicate number (another registration won the race) rolls the
        session back and recomputes from the new latest ticket.
        """
        for attempt in range(1, self.max_retries + 1):
            try:
                topic = await self._get_topic(data.topic_id)
                number = next_ticket_number(topic.code, await self._latest_number(topic.id))
                ticket = Queue(
                    number=number,
                    first_name=data.first_name,
                    last_name=data.last_name,
                    topic_id=topic.id,
                    note=data.note,
                )
                self.db.add(ticket)
                await self.db.flush()
                await self.db.refresh(ticket)
                return ticket
            except IntegrityError:
                await self.db.rollback()
                logger.warning(
                    "Ticket number collision on topic %s (attempt %d/%d)",
                    data.topic_id,
                    attempt,
                    self.max_retries,
                )
            except SQLAlchemyError as e:
                logger.error("Failed to create queue for topic %s: %s", data.topic_id, e)
                raise PersistenceError("Failed to create queue") from None

        raise ConflictError("Could not allocate a ticket number, please retry")
