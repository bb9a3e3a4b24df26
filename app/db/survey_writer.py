# app/db/survey_writer.py
from fastapi import Request
from sqlalchemy import insert
from sqlalchemy.orm import Session, sessionmaker

from app.models.survey import SurveyResponse
from app.schemas.survey import SurveySubmission


class StoreNotConfigured(RuntimeError):
    """Raised on write when the service was started without a DATABASE_URL."""


class SurveyWriter:
    """
    Appends survey rows through a pooled session factory.
    One instance per process; built in create_app and shared by all requests.
    """

    def __init__(self, session_factory: sessionmaker[Session] | None):
        self._session_factory = session_factory

    def write(self, submission: SurveySubmission, user_agent: str | None, ip_hash: str | None) -> None:
        if self._session_factory is None:
            raise StoreNotConfigured("database is not configured")

        stmt = insert(SurveyResponse).values(
            age_group=submission.age_group,
            district=submission.district,
            topics=list(submission.topics),
            other_topic=submission.other_topic or None,
            comment=submission.comment or None,
            wants_updates=submission.wants_updates,
            email=str(submission.email) if submission.email else None,
            user_agent=user_agent or None,
            ip_hash=ip_hash,
        )
        # begin() commits on success and rolls back if the insert raises
        with self._session_factory() as db, db.begin():
            db.execute(stmt)


def get_writer(request: Request) -> SurveyWriter:
    """FastAPI dependency returning the writer owned by the running app."""
    return request.app.state.survey_writer
