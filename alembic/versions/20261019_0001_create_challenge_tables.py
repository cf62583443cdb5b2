"""create challenge tables

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20261019_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("external_id", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_external_id", "users", ["external_id"], unique=True)

    op.create_table(
        "challenges",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("current_day", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="active"),
        sa.Column("program_length", sa.Integer(), nullable=False, server_default="75"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_challenges_user_id", "challenges", ["user_id"], unique=False)
    op.create_index("ix_challenges_created_at", "challenges", ["created_at"], unique=False)

    op.create_table(
        "sections",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("challenge_id", sa.Uuid(), sa.ForeignKey("challenges.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("order", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_sections_challenge_id", "sections", ["challenge_id"], unique=False)

    op.create_table(
        "tasks",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("section_id", sa.Uuid(), sa.ForeignKey("sections.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("task_type", sa.String(length=32), nullable=False, server_default="boolean"),
        sa.Column("required", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("restart_on_fail", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("strikes_enabled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("strikes_limit", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("order", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_tasks_section_id", "tasks", ["section_id"], unique=False)

    op.create_table(
        "day_records",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("challenge_id", sa.Uuid(), sa.ForeignKey("challenges.id"), nullable=False),
        sa.Column("day_number", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("notes", sa.Text(), nullable=False, server_default=""),
        sa.Column("progress_photo_url", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("energy_level", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("mood_level", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("challenge_id", "day_number", name="uq_day_record_per_day"),
    )
    op.create_index("ix_day_records_challenge_id", "day_records", ["challenge_id"], unique=False)
    op.create_index("ix_day_records_day_number", "day_records", ["day_number"], unique=False)

    op.create_table(
        "task_records",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("day_record_id", sa.Uuid(), sa.ForeignKey("day_records.id"), nullable=False),
        sa.Column(
            "task_id",
            sa.Uuid(),
            sa.ForeignKey("tasks.id", deferrable=True, initially="DEFERRED"),
            nullable=False,
        ),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("value", sa.JSON(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("day_record_id", "task_id", name="uq_task_record_per_day"),
    )
    op.create_index("ix_task_records_day_record_id", "task_records", ["day_record_id"], unique=False)
    op.create_index("ix_task_records_task_id", "task_records", ["task_id"], unique=False)

    op.create_table(
        "measurements",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("challenge_id", sa.Uuid(), sa.ForeignKey("challenges.id"), nullable=False),
        sa.Column("day_number", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("chest", sa.Float(), nullable=True),
        sa.Column("waist", sa.Float(), nullable=True),
        sa.Column("hips", sa.Float(), nullable=True),
        sa.Column("arms", sa.Float(), nullable=True),
        sa.Column("thighs", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_measurements_challenge_id", "measurements", ["challenge_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_measurements_challenge_id", table_name="measurements")
    op.drop_table("measurements")

    op.drop_index("ix_task_records_task_id", table_name="task_records")
    op.drop_index("ix_task_records_day_record_id", table_name="task_records")
    op.drop_table("task_records")

    op.drop_index("ix_day_records_day_number", table_name="day_records")
    op.drop_index("ix_day_records_challenge_id", table_name="day_records")
    op.drop_table("day_records")

    op.drop_index("ix_tasks_section_id", table_name="tasks")
    op.drop_table("tasks")

    op.drop_index("ix_sections_challenge_id", table_name="sections")
    op.drop_table("sections")

    op.drop_index("ix_challenges_created_at", table_name="challenges")
    op.drop_index("ix_challenges_user_id", table_name="challenges")
    op.drop_table("challenges")

    op.drop_index("ix_users_external_id", table_name="users")
    op.drop_table("users")
