"""
Main application entry point.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from opsgraph.core.config import Settings, log_config_info, settings
from opsgraph.db.mongodb import MongoDB
from opsgraph.dependencies.services import build_services
from opsgraph.graphql.schema import create_graphql_router, validate_schema

logger = logging.getLogger(__name__)


def configure_logging(config: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(config: Settings = settings, mongodb: Optional[MongoDB] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Application settings
        mongodb: Optional connection manager (a new one is built from config otherwise)

    Returns:
        FastAPI instance with the GraphQL router mounted
    """
    if mongodb is None:
        mongodb = MongoDB(config.MONGODB_URL, config.MONGODB_DB)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_config_info(config)
        validate_schema()

        mongodb.connect_to_mongodb()
        app.state.services = build_services(mongodb)
        logger.info("Application started successfully")

        yield

        mongodb.close_mongodb_connection()
        logger.info("Application shutdown")

    app = FastAPI(title=config.PROJECT_NAME, lifespan=lifespan)
    app.state.mongodb = mongodb

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled errors."""
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": f"Internal server error: {str(exc)}"}
        )

    app.include_router(create_graphql_router(config.GRAPHQL_PATH, config.GRAPHIQL))

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": f"Welcome to {config.PROJECT_NAME} API"}

    @app.get("/health")
    async def health():
        """Report whether MongoDB answers."""
        if await mongodb.ping():
            return {"status": "ok"}
        return JSONResponse(status_code=503, content={"status": "unavailable"})

    return app


configure_logging(settings)
app = create_app()
