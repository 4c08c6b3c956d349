"""Initial schema: users, sessions, documents, symptoms, appointments, waitlist

Revision ID: 3f9c2d1a7b40
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f9c2d1a7b40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "sessions",
        sa.Column("sid", sa.String(), primary_key=True),
        sa.Column("sess", sa.JSON(), nullable=False),
        sa.Column("expire", sa.DateTime(), nullable=False),
    )
    op.create_index("IDX_session_expire", "sessions", ["expire"])

    op.create_table(
        "users",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("first_name", sa.String(), nullable=True),
        sa.Column("last_name", sa.String(), nullable=True),
        sa.Column("profile_image_url", sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "medical_documents",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("document_type", sa.String(), nullable=False),
        sa.Column("file_name", sa.String(), nullable=False),
        sa.Column("file_path", sa.String(), nullable=False),
        sa.Column("file_size", sa.String(), nullable=False),
        sa.Column("mime_type", sa.String(), nullable=False),
        sa.Column("document_date", sa.Date(), nullable=False),
        sa.Column("doctor_name", sa.String(), nullable=True),
        sa.Column("facility_name", sa.String(), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=True),
        *_timestamps(),
    )
    op.create_index("idx_medical_document_user_id", "medical_documents", ["user_id"])
    op.create_index("idx_medical_document_type", "medical_documents", ["document_type"])
    op.create_index("idx_medical_document_date", "medical_documents", ["document_date"])

    op.create_table(
        "symptoms",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("symptom_name", sa.String(), nullable=False),
        sa.Column("severity", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("duration", sa.String(), nullable=True),
        sa.Column("triggers", sa.JSON(), nullable=True),
        sa.Column("medications", sa.JSON(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("date_recorded", sa.Date(), nullable=False),
        sa.Column("time_of_day", sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index("idx_symptom_user_id", "symptoms", ["user_id"])
    op.create_index("idx_symptom_date_recorded", "symptoms", ["date_recorded"])

    op.create_table(
        "appointments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("doctor_name", sa.String(), nullable=False),
        sa.Column("specialty", sa.String(), nullable=True),
        sa.Column("appointment_date", sa.DateTime(), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="scheduled"),
        sa.Column("reminder_sent", sa.Boolean(), nullable=True, server_default=sa.false()),
        *_timestamps(),
    )

    op.create_table(
        "waitlist_signups",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=True),
        sa.Column("source", sa.String(), nullable=False, server_default="unknown"),
        *_timestamps(),
    )
    op.create_index(
        "ix_waitlist_signups_email", "waitlist_signups", ["email"], unique=True
    )


def downgrade() -> None:
    op.drop_index("ix_waitlist_signups_email", table_name="waitlist_signups")
    op.drop_table("waitlist_signups")
    op.drop_table("appointments")
    op.drop_index("idx_symptom_date_recorded", table_name="symptoms")
    op.drop_index("idx_symptom_user_id", table_name="symptoms")
    op.drop_table("symptoms")
    op.drop_index("idx_medical_document_date", table_name="medical_documents")
    op.drop_index("idx_medical_document_type", table_name="medical_documents")
    op.drop_index("idx_medical_document_user_id", table_name="medical_documents")
    op.drop_table("medical_documents")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
    op.drop_index("IDX_session_expire", table_name="sessions")
    op.drop_table("sessions")
