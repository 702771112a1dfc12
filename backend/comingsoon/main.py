import logging
import sys
from datetime import timedelta
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .routers import coming_soon
from .services.registry import EmailRegistry

logger = logging.getLogger("comingsoon.main")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application. The registry is loaded from disk here, before
    the server starts accepting connections.
    """
    if settings is None:
        settings = Settings()
        configure_logging(settings)

    logger.info("Using email file path: %s", settings.EMAIL_FILE_PATH)
    registry = EmailRegistry(settings.EMAIL_FILE_PATH)
    loaded = registry.load()
    logger.info("Service started, loaded %d emails.", loaded)

    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings
    app.state.registry = registry

    # ---------------------------------------------------
    # CORS (single configured origin)
    # ---------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.HOST],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Authorization", "X-Secret-Token"],
        expose_headers=["Content-Length"],
        max_age=int(timedelta(hours=12).total_seconds()),
    )

    # ---------------------------------------------------
    # Error bodies use {"error": ...}
    # ---------------------------------------------------
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request. 'email' field is required."},
        )

    # ---------------------------------------------------
    # Health check
    # ---------------------------------------------------
    @app.get("/health", tags=["health"])
    def health():
        return {"status": "ok", "emails": len(registry)}

    app.include_router(coming_soon.router, tags=["coming-soon"])

    return app


def run() -> None:
    """Console-script entry point: `comingsoon`."""
    try:
        settings = Settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.ERROR, format="%(asctime)s %(levelname)s %(message)s")
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    configure_logging(settings)
    app = create_app(settings)
    uvicorn.run(app, host=settings.BIND_ADDRESS, port=settings.PORT)


if __name__ == "__main__":
    run()
