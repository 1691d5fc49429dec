from sqlalchemy import Column, Integer, String, Boolean, DateTime
from datetime import datetime, timezone
from tasktracker.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    __tablename__ = "tasks"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)
    # set on INSERT only; updates never touch it
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return (
            f"Task(id={self.id!r}, title={self.title!r}, description={self.description!r}, "
            f"completed={self.completed!r}, created_at={self.created_at!r})"
        )
