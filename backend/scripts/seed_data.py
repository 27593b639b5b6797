"""Seed the database with campuses, fields, levels, users and a few subjects."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from coursereview.database import SessionLocal, engine, Base
import coursereview.models  # noqa: F401

from coursereview.models.user import User
from coursereview.models.catalog import Campus, Field, Level
from coursereview.models.subject import Subject, Review
from coursereview.schemas.version import ReviewAction
from coursereview.services import version_service


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).count() > 0:
            print("Database already seeded. Skipping.")
            return

        # Users
        users = [
            User(name="Moderator", email="moderator@example.com", role="moderator"),
            User(name="Kari Nordmann", email="kari@example.com", role="student"),
            User(name="Ola Nordmann", email="ola@example.com", role="student"),
        ]
        db.add_all(users)
        db.flush()

        # Campuses and fields
        campuses = [Campus(name="Trondheim"), Campus(name="Gjøvik"), Campus(name="Ålesund")]
        db.add_all(campuses)
        db.flush()
        fields = [
            Field(name="Informatikk", campus_id=campuses[0].campus_id),
            Field(name="Matematikk", campus_id=campuses[0].campus_id),
            Field(name="Informasjonssikkerhet", campus_id=campuses[1].campus_id),
        ]
        db.add_all(fields)

        # Levels
        levels = [Level(name="Bachelor"), Level(name="Master"), Level(name="PhD")]
        db.add_all(levels)
        db.flush()

        # Subjects
        subjects = [
            Subject(subject_id="TDT4120", name="Algoritmer og datastrukturer", field_id=fields[0].field_id,
                    level_id=levels[0].level_id, description="Grunnleggende algoritmer."),
            Subject(subject_id="TDT4100", name="Objektorientert programmering", field_id=fields[0].field_id,
                    level_id=levels[0].level_id, description="Java og objektorientering."),
            Subject(subject_id="TMA4100", name="Matematikk 1", field_id=fields[1].field_id,
                    level_id=levels[0].level_id, description="Kalkulus."),
        ]
        db.add_all(subjects)
        db.flush()

        db.add(Review(subject_id="TDT4120", text="Krevende, men lærerikt.", stars=4,
                      submitter_name=users[1].name, user_id=users[1].user_id))
        db.flush()

        # Initial history
        for field in fields:
            version_service.record_field_version(
                db, field_id=field.field_id, user_id=users[0].user_id,
                description="Initial catalog", commit=False,
            )
        version_service.record_review_version(
            db, subject_id="TDT4120", reviews=version_service.snapshot_reviews(db, "TDT4120"),
            user_id=users[1].user_id, action_type=ReviewAction.COMMENTED.value, commit=False,
        )

        db.commit()
        print("Database seeded successfully.")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
