from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.models.base import Base


class DailyTask(Base):
    __tablename__ = "daily_tasks"

    task_id = Column(Integer, primary_key=True, autoincrement=True)
    pet_id = Column(
        Integer,
        ForeignKey("pets.pet_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    task_name = Column(String(100), nullable=False)

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    pet = relationship("Pet", back_populates="daily_tasks")
