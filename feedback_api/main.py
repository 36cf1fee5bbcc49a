import logging
from typing import Optional

from litestar import Litestar, Request
from litestar.config.cors import CORSConfig
from litestar.datastructures import State
from litestar.di import Provide
from litestar.exceptions import HTTPException, NotFoundException
from litestar.response import Response
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from feedback_api.config import Settings, load_env_file_fallback
from feedback_api.database import Database
from feedback_api.errors import StorageError, ValidationError
from feedback_api.routes import ROUTES
from feedback_api.services import SubmissionService
from feedback_api.utils.logging import log_request_error, request_context

logger = logging.getLogger("FeedbackAPI")


def configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    # debug_log and error_log check this level
    logger.setLevel(level)


def _json(content: dict, status_code: int) -> Response:
    return Response(content=content, status_code=status_code, media_type="application/json")


# --- Exception handlers

def handle_validation_error(request: Request, exc: ValidationError) -> Response:
    logger.info(f"Rejected submission: {', '.join(e.field for e in exc.errors)}")
    return _json(
        {"error": "Validation failed", "details": [e.as_dict() for e in exc.errors]},
        HTTP_400_BAD_REQUEST,
    )


def handle_storage_error(request: Request, exc: StorageError) -> Response:
    # Cause is logged by the service; the client only gets the public message
    return _json({"error": exc.public_message}, HTTP_500_INTERNAL_SERVER_ERROR)


def handle_not_found(request: Request, exc: NotFoundException) -> Response:
    return _json({"error": "Endpoint not found"}, HTTP_404_NOT_FOUND)


def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        log_request_error(request, exc)
        return _json({"error": "Internal server error"}, exc.status_code)
    return _json({"error": exc.detail}, exc.status_code)


def log_exceptions(request: Request, exc: Exception) -> Response:
    log_request_error(request, exc, message="Unhandled exception occurred")
    return _json({"error": "Internal server error"}, HTTP_500_INTERNAL_SERVER_ERROR)


# --- Hooks and dependencies

async def log_request(request: Request) -> None:
    context = request_context(request)
    logger.info(f"{context.get('method')} {context.get('path')}")


def provide_submission_service(state: State) -> SubmissionService:
    return state.submission_service


# --- App init

def create_app(settings: Optional[Settings] = None) -> Litestar:
    """Build the application and its store client.

    The database client lives as long as the app: tables are created on
    startup when ``settings.create_all`` is set, and connections are closed
    on shutdown.
    """
    if settings is None:
        loaded = load_env_file_fallback()
        settings = Settings.from_env()
    else:
        loaded = 0

    configure_logging(settings.debug)
    if loaded:
        logger.info(f"Loaded {loaded} environment variables from .env file")
    logger.info(f"Starting app in {'DEBUG' if settings.debug else 'PRODUCTION'} mode")
    logger.info(f"Allowed origins: {', '.join(settings.cors_origins)}")

    database = Database(settings.database_url, echo=False)
    service = SubmissionService(database)

    async def on_startup() -> None:
        if settings.create_all:
            await database.create_all()

    async def on_shutdown() -> None:
        await database.dispose()

    return Litestar(
        route_handlers=ROUTES,
        debug=settings.debug,
        cors_config=CORSConfig(
            allow_origins=list(settings.cors_origins),
            allow_credentials=True,
        ),
        before_request=log_request,
        dependencies={
            "submissions": Provide(provide_submission_service, sync_to_thread=False),
        },
        state=State({
            "settings": settings,
            "database": database,
            "submission_service": service,
        }),
        on_startup=[on_startup],
        on_shutdown=[on_shutdown],
        exception_handlers={
            ValidationError: handle_validation_error,
            StorageError: handle_storage_error,
            NotFoundException: handle_not_found,
            HTTPException: handle_http_exception,
            Exception: log_exceptions,
        },
    )
