import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings
from app.db.base import Base
from app.db.session import build_engine, build_session_factory
from app.db.survey_writer import StoreNotConfigured, SurveyWriter
from app.schemas.survey import SurveySubmission


@pytest.fixture
def submission():
    return SurveySubmission(age_group="35_49", district="floersheim_mitte", topics=["sport_freizeit"])


def test_build_engine_without_url_returns_none():
    assert build_engine(Settings(_env_file=None, DATABASE_URL="")) is None


def test_write_inserts_one_row(db_url, fetch_rows, submission):
    engine = build_engine(Settings(_env_file=None, DATABASE_URL=db_url))
    Base.metadata.create_all(bind=engine)
    writer = SurveyWriter(build_session_factory(engine))

    assert writer.write(submission, "ua/1.0", "ab" * 32) is None

    (row,) = fetch_rows()
    assert row.district == "floersheim_mitte"
    assert row.user_agent == "ua/1.0"
    assert row.ip_hash == "ab" * 32
    assert row.created_at is not None
    engine.dispose()


def test_write_without_store_raises(submission):
    with pytest.raises(StoreNotConfigured):
        SurveyWriter(None).write(submission, None, None)


def test_write_propagates_store_errors(db_url, submission):
    # no create_all: the table does not exist
    engine = build_engine(Settings(_env_file=None, DATABASE_URL=db_url))
    writer = SurveyWriter(build_session_factory(engine))
    with pytest.raises(SQLAlchemyError):
        writer.write(submission, None, None)
    engine.dispose()
