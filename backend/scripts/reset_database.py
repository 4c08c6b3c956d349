"""
Reset database and add test user.

This script:
1. Creates any missing tables
2. Deletes all data from all tables
3. Upserts a test user (test-user-123)
4. Removes every file in the upload directory

Usage:
    python scripts/reset_database.py
"""

import os
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.orm import Session
from medivault.core.config import settings
from medivault.core.database import SessionLocal, init_db
from medivault.models import (
    User,
    MedicalDocument,
    Symptom,
    Appointment,
    Session as LoginSession,
    WaitlistSignup,
)
from medivault.schemas.user import UpsertUser
from medivault.services.database_service import DatabaseService


def count_records(db: Session):
    """Count records in all tables."""
    counts = {
        "users": db.query(User).count(),
        "medical_documents": db.query(MedicalDocument).count(),
        "symptoms": db.query(Symptom).count(),
        "appointments": db.query(Appointment).count(),
        "sessions": db.query(LoginSession).count(),
        "waitlist_signups": db.query(WaitlistSignup).count(),
    }
    return counts


def print_counts(title: str, counts: dict):
    """Print table counts."""
    print(f"\n{'=' * 60}")
    print(f"{title}")
    print(f"{'=' * 60}")
    total = 0
    for table, count in counts.items():
        print(f"  {table:<25} {count:>6} records")
        total += count
    print(f"{'=' * 60}")
    print(f"  {'TOTAL':<25} {total:>6} records")
    print(f"{'=' * 60}\n")


def clear_uploads(upload_dir: str) -> int:
    """Delete uploaded files; returns how many were removed."""
    if not os.path.isdir(upload_dir):
        return 0
    removed = 0
    for entry in os.scandir(upload_dir):
        if entry.is_file():
            os.remove(entry.path)
            removed += 1
    return removed


def reset_database():
    """Reset all data and add test user."""
    init_db()
    db = SessionLocal()

    try:
        print("\n🚀 Starting database reset...\n")

        # Count before deletion
        print("📊 Current database state:")
        before_counts = count_records(db)
        print_counts("BEFORE RESET", before_counts)

        # Confirm deletion
        if before_counts["users"] > 0 or before_counts["medical_documents"] > 0:
            response = input("⚠️  This will delete ALL data. Continue? (yes/no): ")
            if response.lower() != "yes":
                print("❌ Reset cancelled.")
                return

        print("🗑️  Deleting all data...")

        # Child tables first, users last
        db.query(MedicalDocument).delete()
        db.query(Symptom).delete()
        db.query(Appointment).delete()
        db.query(LoginSession).delete()
        db.query(WaitlistSignup).delete()
        db.query(User).delete()

        db.commit()
        print("✅ All data deleted successfully!\n")

        removed = clear_uploads(settings.upload_dir)
        print(f"🧹 Removed {removed} uploaded files from {settings.upload_dir}\n")

        # Create test user
        print("👤 Creating test user...")
        test_user = DatabaseService(db).upsert_user(
            UpsertUser(
                id="test-user-123",
                email="test@medivault.app",
                first_name="Test",
                last_name="User",
            )
        )

        print("✅ Test user created successfully!")
        print(f"   User ID: {test_user.id}")
        print(f"   Email: {test_user.email}")
        print(f"   Name: {test_user.first_name} {test_user.last_name}\n")

        # Final count
        final_counts = count_records(db)
        print_counts("FINAL STATE", final_counts)

        print("🎉 Database reset complete!")

    except Exception as e:
        print(f"\n❌ Error during reset: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    reset_database()
