"""Medical document model."""

from sqlalchemy import Column, String, Integer, Text, Date, ForeignKey, JSON, Index
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin

DOCUMENT_TYPES = ("lab_result", "prescription", "x_ray", "consultation", "other")


class MedicalDocument(Base, TimestampMixin):
    """One uploaded file plus its metadata."""

    __tablename__ = "medical_documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    document_type = Column(String, nullable=False)  # one of DOCUMENT_TYPES

    # File info
    file_name = Column(String, nullable=False)  # original upload name
    file_path = Column(String, nullable=False)
    file_size = Column(String, nullable=False)
    mime_type = Column(String, nullable=False)

    # Document metadata
    document_date = Column(Date, nullable=False)
    doctor_name = Column(String, nullable=True)
    facility_name = Column(String, nullable=True)
    tags = Column(JSON, nullable=True, default=list)

    # Relationships
    user = relationship("User", back_populates="documents")

    __table_args__ = (
        Index("idx_medical_document_user_id", "user_id"),
        Index("idx_medical_document_type", "document_type"),
        Index("idx_medical_document_date", "document_date"),
    )
