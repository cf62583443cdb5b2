import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import sessionmaker
from starlette.exceptions import HTTPException as StarletteHTTPException

from hardinfinity.api import router
from hardinfinity.api.responses import error_response
from hardinfinity.config import settings
from hardinfinity.db import make_engine, make_session_factory
from hardinfinity.errors import CoreError
from hardinfinity.log_config import setup_logging
from hardinfinity.models import Base

logger = logging.getLogger(__name__)


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg', 'invalid value')}" if location else str(first.get("msg", "Invalid request body"))


def create_app(session_factory: Optional[sessionmaker] = None) -> FastAPI:
    if session_factory is None:
        session_factory = make_session_factory(make_engine(settings.DATABASE_URL))

    app = FastAPI(title="Hardinfinity API", version="0.1.0")
    app.state.session_factory = session_factory
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS if settings.CORS_ORIGINS else ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Accept", "Authorization", "Content-Type", "X-CSRF-Token"],
    )
    app.include_router(router)

    @app.exception_handler(CoreError)
    async def core_error_handler(request: Request, exc: CoreError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        return error_response(exc.status_code, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return error_response(400, _first_validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return error_response(500, "Internal server error")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/health/live")
    def health_live() -> dict[str, str]:
        return {"status": "alive"}

    @app.get("/health/ready")
    def health_ready() -> dict[str, str]:
        with app.state.session_factory() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ready"}

    @app.on_event("startup")
    def on_startup() -> None:
        if settings.AUTO_CREATE_SCHEMA:
            Base.metadata.create_all(bind=app.state.session_factory.kw["bind"])
        logger.info("Hardinfinity API started")

    return app


setup_logging()
app = create_app()
