from sqlalchemy import Column, Integer, String, Date, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.models.base import Base
import enum

class PetSex(str, enum.Enum):
    M = "M"
    F = "F"
    Unknown = "Unknown"

class Pet(Base):
    __tablename__ = "pets"

    pet_id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name = Column(String(50), nullable=False)
    species = Column(String(30))     # canine / feline / ...
    breed = Column(String(50))
    sex = Column(Enum(PetSex), default=PetSex.Unknown, nullable=True)

    birthdate = Column(Date)
    adoption_date = Column(Date)
    image_url = Column(String(255))

    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="pets")
    daily_tasks = relationship("DailyTask", back_populates="pet", cascade="all, delete-orphan")
    preventatives = relationship("Preventative", back_populates="pet", cascade="all, delete-orphan")
    service_tasks = relationship("ServiceTask", back_populates="pet", cascade="all, delete-orphan")
