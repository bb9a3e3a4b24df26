# app/db/session.py
import logging
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, Session
from app.core.config import Settings

logger = logging.getLogger(__name__)


def _connect_args(url: str, settings: Settings) -> dict:
    backend = make_url(url).get_backend_name()
    if backend == "sqlite":
        return {"check_same_thread": False, "timeout": settings.DB_CONNECT_TIMEOUT}
    if backend == "postgresql":
        args = {"connect_timeout": settings.DB_CONNECT_TIMEOUT}
        if settings.DB_SSLMODE:
            args["sslmode"] = settings.DB_SSLMODE
        if settings.DB_STATEMENT_TIMEOUT_MS > 0:
            args["options"] = f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}"
        return args
    return {}


def build_engine(settings: Settings) -> Engine | None:
    """
    Create the process-wide engine (and its connection pool).
    Returns None when no DATABASE_URL is configured.
    """
    url = settings.database_url
    if not url:
        logger.warning("DATABASE_URL is not set; survey submissions will be rejected")
        return None

    is_sqlite = url.startswith("sqlite")
    kwargs = {"future": True, "pool_pre_ping": True, "connect_args": _connect_args(url, settings)}
    if not is_sqlite:
        kwargs["pool_timeout"] = settings.DB_POOL_TIMEOUT

    engine = create_engine(url, **kwargs)

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragmas(dbapi_connection, connection_record):
            cur = dbapi_connection.cursor()
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.close()

    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        future=True,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
