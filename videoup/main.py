import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from videoup import config
from videoup.errors import PayloadNotFound, StorageError, VideoNotFound
from videoup.routes import router
from videoup.services.video_file_store import VideoFileStore
from videoup.services.video_registry import VideoRegistry

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(
    registry: Optional[VideoRegistry] = None,
    store: Optional[VideoFileStore] = None,
) -> FastAPI:
    app = FastAPI(title="VideoUp", description="Video metadata and data upload service")

    app.state.registry = registry if registry is not None else VideoRegistry()
    app.state.store = store if store is not None else VideoFileStore()

    @app.on_event("startup")
    def on_startup():
        logger.info(f"Serving video data from {app.state.store.directory}")

    @app.exception_handler(VideoNotFound)
    @app.exception_handler(PayloadNotFound)
    async def not_found_handler(request: Request, exc: Exception):
        logger.info(f"{request.method} {request.url.path}: {exc}")
        return Response(status_code=404)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    app.include_router(router)
    return app


app = create_app()


def run():
    uvicorn.run("videoup.main:app", host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
