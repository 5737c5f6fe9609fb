"""
Main FastAPI application for the Hacker News backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import is_production, settings
from ..database import init_database
from ..database.connection import dispose_database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)

ALLOWED_GRAPHQL_METHODS = "GET, POST, OPTIONS"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Hacker News API...")
    init_database()

    from ..validation import (
        ValidationError,
        get_startup_recommendations,
        validate_startup_configuration,
    )

    try:
        validation_results = await validate_startup_configuration()

        if not validation_results["overall_valid"]:
            logger.error(
                "Application configuration validation failed - some features may not work properly",
                database_errors=validation_results["database"].get("errors", []),
                auth_errors=validation_results["auth"].get("errors", []),
            )
            if is_production():
                raise ValidationError("Critical configuration validation failed in production")

        recommendations = get_startup_recommendations(validation_results)
        if recommendations:
            logger.info("Configuration recommendations", recommendations=recommendations)

    except ValidationError:
        raise
    except Exception as e:
        logger.error(
            "Unexpected error during startup validation",
            error=str(e),
            note="Application will continue but may have configuration issues",
        )

    yield

    logger.info("Shutting down Hacker News API...")
    await dispose_database()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Hacker News API",
        description="GraphQL backend for links, comments and users",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    # CORS preflights are answered here, before any route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import GRAPHQL_PATH, create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(), prefix="")

    @app.options(GRAPHQL_PATH)
    async def graphql_options() -> Response:  # pyright: ignore [reportUnusedFunction]
        """Plain OPTIONS request (not a CORS preflight) on the GraphQL endpoint."""
        return Response(status_code=204, headers={"Allow": ALLOWED_GRAPHQL_METHODS})

    logger.info("GraphQL endpoint initialized successfully", endpoint=GRAPHQL_PATH)

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hackernews.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
