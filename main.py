from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import FRONTEND_URL, LOG_LEVEL, LOG_JSON
from app.core.errors import format_validation_errors
from app.core.logging import configure_logging, get_logger
from app.database import dispose_engine
from app.api import system
from app.api import worldometer
from app.api.worldometer_utils import cache_stats_responses

configure_logging(level=LOG_LEVEL, json_logs=LOG_JSON)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await dispose_engine()


app = FastAPI(
    title="Worldometer Stats API",
    description="""
    Read-only pandemic statistics sourced from worldometer snapshots.
    Serves the latest figures per country, the top N countries and
    global totals, with a response cache in front.
    """,
    version="3.0.0",
    license_info={
        "name": "MIT",
    },
    lifespan=lifespan,
)


@app.middleware("http")
async def middleware(request, call_next):
    return await cache_stats_responses(request, call_next)


# Added after the cache middleware so it wraps it: cache hits return early
# and still need the CORS headers.
app.add_middleware(
    CORSMiddleware,
    allow_origins=[FRONTEND_URL, "http://127.0.0.1:5173", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": format_validation_errors(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(
        "database error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


app.include_router(system.router, prefix="/api", tags=["System"])
app.include_router(
    worldometer.router, prefix="/v3/stats/worldometer", tags=["Stats - Worldometer"]
)


@app.get("/")
async def root():
    return {"message": "Worldometer Stats API is running"}
