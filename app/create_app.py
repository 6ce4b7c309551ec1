"""
FastAPI application factory following kkb_fastapi pattern.

``get_app`` wires config, database lifespan, routers, CORS and the JSON
error handlers. Tests build their apps through the same factory.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import (
    activities_router,
    calculations_router,
    factors_router,
    rewards_router,
    users_router,
)
from app.core.config import get_config
from app.database.base import get_db_url, get_engine_kw
from app.database.session_manager.db_session import Database

logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Dev servers of the campus web client
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
]


def register_routers(app: FastAPI):
    """Mount the factors, calculations, users, activities and rewards routers."""
    for router in (
        factors_router,
        calculations_router,
        users_router,
        activities_router,
        rewards_router,
    ):
        app.include_router(router)


def register_exception_handlers(app: FastAPI):
    """Render every error as a JSON body with a ``detail`` field."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logging.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code, content={"detail": str(exc.detail)}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": jsonable_encoder(exc.errors()),
                "message": "Validation error",
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logging.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database engine for the app's lifetime."""
    async_db_url = get_db_url(app.state.config)
    Database.init(async_db_url, engine_kw=get_engine_kw(async_db_url))
    logging.info(f"Database ready ({async_db_url.drivername}), serving requests")

    try:
        yield
    finally:
        await Database.dispose()
        logging.info("Database connections closed")


def get_app(config_file: str) -> FastAPI:
    """
    Build the Green Campus API.

    Args:
        config_file: File name inside ``app/cfg`` (e.g., "production.toml")

    Returns:
        Configured FastAPI application; ``app.state.config`` holds the Config
    """
    config = get_config(config_file)
    api_config = config.data.get("api", {})

    app = FastAPI(
        title=api_config.get("title", "Green Campus Carbon Tracker API"),
        description=api_config.get(
            "description", "Campus carbon-footprint tracking and reward points"
        ),
        version=api_config.get("version", "1.0.0"),
        debug=api_config.get("debug", False),
        lifespan=lifespan,
        generate_unique_id_function=lambda route: (
            f"{route.tags[0]}-{route.name}" if route.tags else route.name
        ),
    )
    app.state.config = config

    register_routers(app)
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.get("cors_origins", DEFAULT_CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app
