"""Task model"""

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime
from task_api.core.database import Base


class TaskStatus(enum.IntEnum):
    TODO = 0
    IN_PROGRESS = 1
    DONE = 2


def utcnow() -> datetime:
    # UTC naïf: sqlite ne conserve pas le fuseau
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(200), nullable=False)
    description = Column(String(1000), nullable=True)
    status = Column(Integer, nullable=False, default=TaskStatus.TODO, index=True)
    due_date = Column(DateTime, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
