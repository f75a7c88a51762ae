"""FastAPI application factory and configuration."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import register_routes
from .core import ALLOWED_CORS_ORIGINS, WeeklogError, configure_logging, get_logger
from .core.storage import get_weeklog

logger = get_logger(__name__)

ERROR_STATUS: Dict[str, int] = {
    "ERR_ARGS": 400,
    "ERR_ENCODE": 400,
    "ERR_COMMAND": 400,
    "ERR_CATEGORY": 422,
    "ERR_TIMESTAMP": 404,
    "ERR_CORRUPT": 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    weeklog = get_weeklog()
    weeklog.ensure_exists()
    logger.info(
        "weeklog_ready",
        path=str(weeklog.path),
        week_start=weeklog.context.week_start,
        categories=weeklog.context.registry.keys(),
    )
    yield


async def weeklog_error_handler(request: Request, exc: WeeklogError) -> JSONResponse:
    status = ERROR_STATUS.get(exc.code, 500)
    log = logger.error if status >= 500 else logger.warning
    log("weeklog_error", code=exc.code, detail=exc.message, path=request.url.path)
    return JSONResponse(
        status_code=status, content={"detail": exc.message, "code": exc.code}
    )


def create_app() -> FastAPI:
    app = FastAPI(title="Weeklog API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_exception_handler(WeeklogError, weeklog_error_handler)

    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("weeklog.app:app", host="127.0.0.1", port=3000, reload=True)
