"""User model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """User model, keyed by the auth provider's subject id."""

    __tablename__ = "users"

    id = Column(String, primary_key=True)  # "sub" claim from the auth provider
    email = Column(String, unique=True, nullable=True, index=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    profile_image_url = Column(String, nullable=True)

    # Relationships
    documents = relationship("MedicalDocument", back_populates="user")
    symptoms = relationship("Symptom", back_populates="user")
    appointments = relationship("Appointment", back_populates="user")
