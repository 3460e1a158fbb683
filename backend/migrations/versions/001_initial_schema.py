"""Initial database schema.

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

QUEUE_STATUSES = ("WAITING", "IN_PROGRESS", "CALLED", "COMPLETED", "CANCELLED")


def upgrade() -> None:
    op.create_table(
        "configs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("login_not_cmu", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.execute("INSERT INTO configs (id, login_not_cmu) VALUES (1, true)")

    op.create_table(
        "counters",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("counter", sa.String(50), nullable=False),
        sa.Column("status", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("time_closed", sa.Time(), server_default="16:00:00", nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("counter"),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("firstname_th", sa.String(100), nullable=True),
        sa.Column("lastname_th", sa.String(100), nullable=True),
        sa.Column("firstname_en", sa.String(100), nullable=True),
        sa.Column("lastname_en", sa.String(100), nullable=True),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("counter_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["counter_id"], ["counters.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "topics",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("topic_th", sa.String(255), nullable=False),
        sa.Column("topic_en", sa.String(255), nullable=False),
        sa.Column("code", sa.String(10), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("topic_th"),
        sa.UniqueConstraint("topic_en"),
        sa.UniqueConstraint("code"),
    )

    op.create_table(
        "queues",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("no", sa.String(20), nullable=False),
        sa.Column("student_id", sa.String(9), nullable=True),
        sa.Column("firstname", sa.String(100), nullable=False),
        sa.Column("lastname", sa.String(100), nullable=False),
        sa.Column("topic_id", sa.Integer(), nullable=False),
        sa.Column("note", sa.String(255), nullable=True),
        sa.Column(
            "status",
            sa.Enum(*QUEUE_STATUSES, name="queue_status"),
            server_default="WAITING",
            nullable=False,
        ),
        sa.Column("counter_id", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["counter_id"], ["counters.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("topic_id", "no", name="uq_queues_topic_id_no"),
    )
    op.create_index("ix_queues_topic_id", "queues", ["topic_id"])
    op.create_index("ix_queues_topic_id_created_at", "queues", ["topic_id", "created_at"])


def downgrade() -> None:
    op.drop_index("ix_queues_topic_id_created_at", table_name="queues")
    op.drop_index("ix_queues_topic_id", table_name="queues")
    op.drop_table("queues")
    op.drop_table("topics")
    op.drop_table("users")
    op.drop_table("counters")
    op.drop_table("configs")
    op.execute("DROP TYPE IF EXISTS queue_status")
