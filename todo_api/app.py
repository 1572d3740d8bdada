import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from todo_api.config import Settings
from todo_api.database import check_connection, create_engine, create_sessionmaker
from todo_api.errors import APIError, api_error_handler
from todo_api.routes import router

logger = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """Build the application around one shared engine opened at startup.

    Startup fails, and no request is served, if the database cannot be
    reached.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine(settings.database_url)
        try:
            await check_connection(engine)
        except Exception:
            await engine.dispose()
            raise
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        logger.info("Todo API ready")
        yield
        await engine.dispose()
        logger.info("Database engine disposed")

    app = FastAPI(
        title="Todo API",
        description="CRUD service for todos backed by a relational database",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(APIError, api_error_handler)
    app.include_router(router)
    return app
