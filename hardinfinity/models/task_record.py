import uuid
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from hardinfinity.models.base import Base


class TaskRecord(Base):
    __tablename__ = "task_records"
    __table_args__ = (UniqueConstraint("day_record_id", "task_id", name="uq_task_record_per_day"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    day_record_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("day_records.id"), index=True)
    # Checked at commit so a challenge cascade may drop tasks before their records.
    task_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("tasks.id", deferrable=True, initially="DEFERRED"), index=True
    )
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    value: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    notes: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
