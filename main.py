import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from cms_bootstrap.config import settings
from cms_bootstrap.exception_handlers import register_exception_handlers
from cms_bootstrap.logging_config import setup_structured_logging
from cms_bootstrap.routes import snapshot
from cms_bootstrap.snapshot.state import SnapshotConfig

setup_structured_logging(settings.log_level, json_format=settings.log_json)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load the persisted snapshot before serving anything
    app.state.snapshot_config.refresh(settings.snapshot_path)
    if app.state.snapshot_config.is_loaded:
        logger.info("Snapshot loaded from %s", settings.snapshot_path)
    else:
        logger.warning("No snapshot found at %s; trigger a rebuild", settings.snapshot_path)
    yield


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="CMS bootstrap snapshot service",
        debug=settings.debug,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.snapshot_config = SnapshotConfig()

    register_exception_handlers(app)
    app.include_router(snapshot.router, prefix="/api/v1")

    if settings.debug:
        logger.info(f"Running in {settings.environment} mode")
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
