"""Database service for basic CRUD operations."""

from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import and_, or_, desc
from datetime import date, datetime

from ..models import MedicalDocument, Symptom, User
from ..schemas.document import MedicalDocumentCreate
from ..schemas.symptom import SymptomCreate, SymptomUpdate
from ..schemas.user import UpsertUser


def _contains_pattern(text: str) -> str:
    """LIKE pattern matching ``text`` literally anywhere in a column."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class DatabaseService:
    """
    Service for basic database operations.

    Every lookup of a user-owned row filters on id and owner in one
    predicate, so a row owned by someone else reads exactly like a missing
    one.
    """

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    # ============================================================
    # USERS
    # ============================================================

    def get_user(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        return self.db.query(User).filter(User.id == user_id).first()

    def upsert_user(self, user_data: UpsertUser) -> User:
        """Insert a user or merge the given fields into the existing row."""
        values = user_data.model_dump(exclude_unset=True)
        user = self.get_user(user_data.id)
        if user is None:
            user = User(**values)
            self.db.add(user)
        else:
            for field, value in values.items():
                setattr(user, field, value)
        user.updated_at = datetime.utcnow()
        self.db.commit()
        self.db.refresh(user)
        return user

    # ============================================================
    # MEDICAL DOCUMENTS
    # ============================================================

    def create_medical_document(self, document: MedicalDocumentCreate) -> MedicalDocument:
        """Create a new document record."""
        record = MedicalDocument(**document.model_dump())
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def get_medical_documents(
        self, user_id: str, limit: Optional[int] = None
    ) -> List[MedicalDocument]:
        """Get a user's documents, newest document date first."""
        query = (
            self.db.query(MedicalDocument)
            .filter(MedicalDocument.user_id == user_id)
            .order_by(
                desc(MedicalDocument.document_date), desc(MedicalDocument.created_at)
            )
        )
        if limit:
            query = query.limit(limit)
        return query.all()

    def get_medical_document(
        self, document_id: int, user_id: str
    ) -> Optional[MedicalDocument]:
        """Get a document by ID if it belongs to the user."""
        return (
            self.db.query(MedicalDocument)
            .filter(
                MedicalDocument.id == document_id, MedicalDocument.user_id == user_id
            )
            .first()
        )

    def get_medical_document_by_file_path(
        self, user_id: str, file_path: str
    ) -> Optional[MedicalDocument]:
        """Get the user's document stored at ``file_path``."""
        return (
            self.db.query(MedicalDocument)
            .filter(
                MedicalDocument.file_path == file_path,
                MedicalDocument.user_id == user_id,
            )
            .first()
        )

    def search_medical_documents(self, user_id: str, query: str) -> List[MedicalDocument]:
        """Case-insensitive substring search over title, description, doctor and facility."""
        pattern = _contains_pattern(query)
        return (
            self.db.query(MedicalDocument)
            .filter(
                and_(
                    MedicalDocument.user_id == user_id,
                    or_(
                        MedicalDocument.title.ilike(pattern, escape="\\"),
                        MedicalDocument.description.ilike(pattern, escape="\\"),
                        MedicalDocument.doctor_name.ilike(pattern, escape="\\"),
                        MedicalDocument.facility_name.ilike(pattern, escape="\\"),
                    ),
                )
            )
            .order_by(desc(MedicalDocument.document_date))
            .all()
        )

    def get_medical_documents_by_type(
        self, user_id: str, document_type: str
    ) -> List[MedicalDocument]:
        """Get a user's documents of one type."""
        return (
            self.db.query(MedicalDocument)
            .filter(
                MedicalDocument.user_id == user_id,
                MedicalDocument.document_type == document_type,
            )
            .order_by(desc(MedicalDocument.document_date))
            .all()
        )

    def delete_medical_document(self, document_id: int, user_id: str) -> bool:
        """Delete a document if owned by the user. Returns whether a row was removed."""
        deleted = (
            self.db.query(MedicalDocument)
            .filter(
                MedicalDocument.id == document_id, MedicalDocument.user_id == user_id
            )
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0

    # ============================================================
    # SYMPTOMS
    # ============================================================

    def create_symptom(self, user_id: str, symptom: SymptomCreate) -> Symptom:
        """Record a new symptom for the user."""
        record = Symptom(user_id=user_id, **symptom.model_dump())
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def get_symptoms(self, user_id: str, limit: Optional[int] = None) -> List[Symptom]:
        """Get a user's symptoms, most recently recorded first."""
        query = (
            self.db.query(Symptom)
            .filter(Symptom.user_id == user_id)
            .order_by(desc(Symptom.date_recorded), desc(Symptom.created_at))
        )
        if limit:
            query = query.limit(limit)
        return query.all()

    def get_symptoms_by_date_range(
        self, user_id: str, start_date: date, end_date: date
    ) -> List[Symptom]:
        """Get symptoms recorded between two dates, inclusive."""
        return (
            self.db.query(Symptom)
            .filter(
                Symptom.user_id == user_id,
                Symptom.date_recorded >= start_date,
                Symptom.date_recorded <= end_date,
            )
            .order_by(desc(Symptom.date_recorded))
            .all()
        )

    def get_symptoms_by_name(self, user_id: str, symptom_name: str) -> List[Symptom]:
        """Case-insensitive substring search on the symptom name."""
        return (
            self.db.query(Symptom)
            .filter(
                Symptom.user_id == user_id,
                Symptom.symptom_name.ilike(
                    _contains_pattern(symptom_name), escape="\\"
                ),
            )
            .order_by(desc(Symptom.date_recorded))
            .all()
        )

    def update_symptom(
        self, symptom_id: int, user_id: str, updates: SymptomUpdate
    ) -> Optional[Symptom]:
        """Apply only the fields present in ``updates``; None if not owned or absent."""
        symptom = (
            self.db.query(Symptom)
            .filter(Symptom.id == symptom_id, Symptom.user_id == user_id)
            .first()
        )
        if symptom is None:
            return None

        for field, value in updates.model_dump(exclude_unset=True).items():
            setattr(symptom, field, value)
        symptom.updated_at = datetime.utcnow()
        self.db.commit()
        self.db.refresh(symptom)
        return symptom

    def delete_symptom(self, symptom_id: int, user_id: str) -> bool:
        """Delete a symptom if owned by the user. Returns whether a row was removed."""
        deleted = (
            self.db.query(Symptom)
            .filter(Symptom.id == symptom_id, Symptom.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0
