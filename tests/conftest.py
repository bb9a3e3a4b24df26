import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.main import create_app
from app.models.survey import SurveyResponse

MINIMAL = {"age_group": "u18", "district": "wicker", "topics": ["umwelt_gruen"]}


def make_settings(**overrides) -> Settings:
    # _env_file=None keeps a developer's .env out of the tests
    return Settings(_env_file=None, **overrides)


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'survey.db'}"


@pytest.fixture
def make_client(db_url):
    clients = []

    def _make(**overrides):
        overrides.setdefault("DATABASE_URL", db_url)
        client = TestClient(create_app(make_settings(**overrides)))
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client(IP_HASH_SALT="pepper")


@pytest.fixture
def fetch_rows(db_url):
    def _fetch():
        engine = create_engine(db_url)
        try:
            with Session(engine) as s:
                return s.execute(select(SurveyResponse).order_by(SurveyResponse.id)).scalars().all()
        finally:
            engine.dispose()
    return _fetch


@pytest.fixture
def minimal_payload():
    return dict(MINIMAL, topics=list(MINIMAL["topics"]))
