"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shellframer.api.routes import router
from shellframer.core.logging import setup_logging
from shellframer.models import FramingError

logger = logging.getLogger(__name__)


async def framing_error_handler(request: Request, exc: FramingError) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=422, content=exc.to_dict())


def create_app(log_level: str = "INFO") -> FastAPI:
    setup_logging(log_level)

    app = FastAPI(
        title="Shell Framer",
        description="Timber framing layout for box-shaped building shells",
        version="0.3.0",
    )

    # CORS: allow a local viewer
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FramingError, framing_error_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
