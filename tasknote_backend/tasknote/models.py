from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from tasknote.db import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskNote(Base):
    """SQLAlchemy model representing a task note."""
    __tablename__ = "task_notes"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    # Set once on insert; never part of an UPDATE.
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=_utcnow,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<TaskNote(id={self.id!r}, title={self.title!r})>"
