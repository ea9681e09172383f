from sqlalchemy import Column, Integer, Date, DateTime, Enum, UniqueConstraint
from sqlalchemy.sql import func
from app.models.base import Base
import enum


class TaskType(str, enum.Enum):
    daily = "daily"
    preventative = "preventative"


class TaskCompletion(Base):
    __tablename__ = "task_completions"
    __table_args__ = (
        # (task, date) 당 완료 기록은 하나
        UniqueConstraint("task_type", "task_id", "completion_date", name="uq_task_completion_per_day"),
    )

    completion_id = Column(Integer, primary_key=True, autoincrement=True)
    # daily_tasks / preventatives 의 id 가 겹치므로 task_type 으로 구분 (FK 없음)
    task_type = Column(Enum(TaskType), nullable=False)
    task_id = Column(Integer, nullable=False)
    completion_date = Column(Date, nullable=False)

    created_at = Column(DateTime, default=func.now())
