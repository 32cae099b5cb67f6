# exercise_tracker/main.py

import logging
import uvicorn
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .api import users
from .database import create_session_factory, create_store_engine, init_db
from .exceptions import TrackerError


logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def register_error_handlers(app: FastAPI):
    """
    Renders every failure with the same {"status": "error", "message": ...} body.
    """

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(request: Request, exc: TrackerError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        messages = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]
        return error_response(422, "; ".join(messages) or "Invalid request")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return error_response(500, "Store is unavailable")

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return error_response(500, "Internal server error")


def create_app(database_url: str = config.DATABASE_URL, default_log_limit: int = config.DEFAULT_LOG_LIMIT) -> FastAPI:
    """
    Builds the application. The store engine is opened on startup,
    kept on app.state for the request dependencies, and disposed on shutdown.
    """
    config.setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_store_engine(database_url)
        init_db(engine)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        logger.info("Connected to store %s", engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            engine.dispose()
            logger.info("Store connection closed")

    app = FastAPI(title="Exercise Tracker", lifespan=lifespan)
    app.state.default_log_limit = default_log_limit

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.mount("/public", StaticFiles(directory=STATIC_DIR), name="public")

    @app.get("/", include_in_schema=False)
    def index():
        return FileResponse(STATIC_DIR / "index.html", media_type="text/html")

    app.include_router(users.router)

    return app


app = create_app()


def run():
    uvicorn.run("exercise_tracker.main:app", host=config.HOST, port=config.PORT)
