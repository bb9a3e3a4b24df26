# app/main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings, settings as default_settings
from app.core.logging_config import configure_logging
from app.core.security_headers import install_security_headers
from app.db.base import Base
from app.db.session import build_engine, build_session_factory
from app.db.survey_writer import SurveyWriter

# Import models so SQLAlchemy knows about them (for create_all)
from app.models.survey import SurveyResponse  # noqa: F401

# Routers
from app.api.routes import router as api_router
from app.api.survey_routes import router as survey_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)
    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Ensure tables exist when running without migrations
        if engine is not None and settings.AUTO_CREATE_TABLES:
            try:
                Base.metadata.create_all(bind=engine)
            except SQLAlchemyError:
                # Keep serving /v1/health; writes will report the failure
                logger.exception("could not create tables")
        logger.info("API on :%s", settings.PORT)
        yield
        if engine is not None:
            engine.dispose()
            logger.info("database pool closed")

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.survey_writer = SurveyWriter(build_session_factory(engine) if engine is not None else None)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_security_headers(app)

    # API routes
    app.include_router(api_router)       # /v1/health
    app.include_router(survey_router)    # /v1/survey

    return app


def serve() -> None:
    """Console entry point: run the API under uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )


app = create_app()


if __name__ == "__main__":
    serve()
