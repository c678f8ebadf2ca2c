import logging
from contextlib import asynccontextmanager

import asyncpg
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from activity import router as activity_router
from auth import router as auth_router
from comments import router as comments_router
from core import errors, responses, settings, validation
from core.db import Database
from core.supabase_auth import SupabaseAuthClient
from profiles import router as profiles_router
from projects import router as projects_router
from tickets import router as tickets_router

API_PREFIX = "/api/v1"

logger = logging.getLogger("devdesk")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A ConfigError here aborts startup and the server process exits.
    config = settings.load_settings()
    database = await Database.connect(
        config.database_url,
        min_size=config.db_pool_min_size,
        max_size=config.db_pool_max_size,
        command_timeout=config.db_command_timeout_s,
    )
    auth_client = SupabaseAuthClient(
        base_url=config.supabase_url,
        api_key=config.supabase_key,
        timeout_s=config.auth_timeout_s,
    )
    app.state.settings = config
    app.state.db = database
    app.state.auth_client = auth_client
    logger.info("startup local_jwt=%s", bool(config.jwt_secret))
    try:
        yield
    finally:
        await auth_client.aclose()
        await database.close()


async def _devdesk_error(_: Request, exc: errors.DevDeskError):
    if exc.status_code >= 500:
        logger.error("request_failed status=%s error=%s", exc.status_code, exc.message)
    return responses.failure(exc.message, status_code=exc.status_code, fields=exc.fields)


async def _request_validation_error(_: Request, exc: RequestValidationError):
    error = validation.validation_error_from_request(exc)
    return responses.failure(error.message, status_code=error.status_code, fields=error.fields)


async def _http_error(_: Request, exc: StarletteHTTPException):
    return responses.failure(str(exc.detail), status_code=exc.status_code)


async def _database_error(request: Request, exc: asyncpg.PostgresError):
    # Database detail goes to the log only.
    logger.exception("database_error path=%s", request.url.path)
    return responses.failure("Internal server error.", status_code=500)


async def _unhandled_error(request: Request, exc: Exception):
    logger.exception("unhandled_error path=%s", request.url.path)
    return responses.failure("Internal server error.", status_code=500)


def create_app() -> FastAPI:
    app = FastAPI(title="DevDesk API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(errors.DevDeskError, _devdesk_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(asyncpg.PostgresError, _database_error)
    app.add_exception_handler(Exception, _unhandled_error)

    app.include_router(auth_router.router, prefix=API_PREFIX, tags=["auth"])
    app.include_router(profiles_router.router, prefix=API_PREFIX, tags=["profiles"])
    app.include_router(projects_router.router, prefix=API_PREFIX, tags=["projects"])
    app.include_router(tickets_router.router, prefix=API_PREFIX, tags=["tickets"])
    app.include_router(comments_router.router, prefix=API_PREFIX, tags=["comments"])
    app.include_router(activity_router.router, prefix=API_PREFIX, tags=["activity"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "devdesk api"}

    return app


logging.basicConfig(
    level=settings.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = create_app()
