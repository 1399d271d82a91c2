import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from tasktrack.core.config import Settings, settings as default_settings
from tasktrack.core.database import Base, create_session_factory
from tasktrack.core.errors import AppError, StorageError
from tasktrack.core.logging import configure_logging
from tasktrack.models import task, task_list, user  # noqa: F401  (register tables)
from tasktrack.routers import health, auth, tasks, lists

logger = logging.getLogger(__name__)


def handle_app_error(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def handle_storage_error(request: Request, exc: SQLAlchemyError):
    # details stay in the log, the caller gets the generic message
    logger.error(f"Storage error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=StorageError.status_code, content=StorageError().to_dict())


def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "invalid request", "detail": jsonable_encoder(exc.errors())}
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    # Init DB
    engine, SessionLocal = create_session_factory(settings.DATABASE_URL)
    Base.metadata.create_all(bind=engine)

    app = FastAPI(
        title="TaskTrack API",
        version="1.0.0"
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = SessionLocal

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(SQLAlchemyError, handle_storage_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    @app.get("/")
    def root():
        return {"message": "TaskTrack API"}

    # Routes
    app.include_router(health.router, prefix="/health")
    app.include_router(auth.router)
    app.include_router(tasks.router)
    app.include_router(lists.router)

    logger.info(f"TaskTrack API ready (database: {engine.url.render_as_string(hide_password=True)})")
    return app
