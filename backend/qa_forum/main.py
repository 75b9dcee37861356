"""Q&A Forum API — application factory and the module-level `app` for uvicorn.

Invariants:
    - The database engine exists only between lifespan startup and shutdown
    - Every router is included here by name; nothing registers itself
    - Error handlers are installed on every app create_app() returns

Design Decisions:
    - create_app() reads Settings once; the lifespan reuses the same object
    - Logging configured in the lifespan so importing the app (tests, alembic) stays silent
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qa_forum.api.error_handlers import register_error_handlers
from qa_forum.api.routes import health, questions
from qa_forum.config import Settings, get_settings
from qa_forum.infrastructure import database
from qa_forum.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def _lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        forum_db = database.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        logger.info(f"{app.title} {app.version} accepting requests")
        try:
            yield
        finally:
            await forum_db.dispose()
            database.db_manager = None
            logger.info(f"{app.title} stopped")

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Q&A Forum API", version="1.0.0", lifespan=_lifespan(settings),
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    for module in (health, questions):
        app.include_router(module.router)
    register_error_handlers(app)
    return app


app = create_app()
