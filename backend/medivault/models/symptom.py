"""Symptom tracking model."""

from sqlalchemy import Column, String, Integer, Text, Date, ForeignKey, JSON, Index
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Symptom(Base, TimestampMixin):
    """A self-reported health event."""

    __tablename__ = "symptoms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    symptom_name = Column(String, nullable=False)
    severity = Column(Integer, nullable=False)  # 1-10 scale
    description = Column(Text, nullable=True)
    location = Column(String, nullable=True)  # body part/area
    duration = Column(String, nullable=True)  # "minutes", "hours", "days"
    triggers = Column(JSON, nullable=True, default=list)
    medications = Column(JSON, nullable=True, default=list)
    notes = Column(Text, nullable=True)
    date_recorded = Column(Date, nullable=False)
    time_of_day = Column(String, nullable=True)  # morning, afternoon, evening, night

    # Relationships
    user = relationship("User", back_populates="symptoms")

    __table_args__ = (
        Index("idx_symptom_user_id", "user_id"),
        Index("idx_symptom_date_recorded", "date_recorded"),
    )
