"""Appointment model (schema only, not exposed over the API yet)."""

from sqlalchemy import Column, String, Integer, Text, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin

APPOINTMENT_STATUSES = ("scheduled", "completed", "cancelled")


class Appointment(Base, TimestampMixin):
    """A doctor's appointment."""

    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    doctor_name = Column(String, nullable=False)
    specialty = Column(String, nullable=True)
    appointment_date = Column(DateTime, nullable=False)
    reason = Column(Text, nullable=True)
    location = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="scheduled")
    reminder_sent = Column(Boolean, nullable=True, default=False)

    user = relationship("User", back_populates="appointments")
