from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.models.base import Base

MIN_DUE_DAY = 1
MAX_DUE_DAY = 31


class Preventative(Base):
    """매월 due_day 에 반복되는 예방 관리 항목 (심장사상충 약 등)"""
    __tablename__ = "preventatives"
    __table_args__ = (
        CheckConstraint(
            f"due_day >= {MIN_DUE_DAY} AND due_day <= {MAX_DUE_DAY}",
            name="ck_preventatives_due_day_range",
        ),
    )

    preventative_id = Column(Integer, primary_key=True, autoincrement=True)
    pet_id = Column(
        Integer,
        ForeignKey("pets.pet_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(100), nullable=False)
    due_day = Column(Integer, nullable=False)
    notes = Column(Text)

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    pet = relationship("Pet", back_populates="preventatives")
