import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from hardinfinity.models.base import Base

TASK_TYPE_BOOLEAN = "boolean"


class Task(Base):
    __tablename__ = "tasks"
    __sibling_parent__ = "section_id"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    section_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("sections.id"), index=True)
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    task_type: Mapped[str] = mapped_column(String(32), default=TASK_TYPE_BOOLEAN)
    required: Mapped[bool] = mapped_column(Boolean, default=False)
    restart_on_fail: Mapped[bool] = mapped_column(Boolean, default=False)
    strikes_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    strikes_limit: Mapped[int] = mapped_column(Integer, default=0)
    order: Mapped[int] = mapped_column("order", Integer, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
