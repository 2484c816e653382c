"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ergoscore.config import get_settings
from ergoscore.logging_config import configure_logging
from ergoscore.routers import assessments_router, health_router, methods_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    configure_logging(settings)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}...")
    logger.info(f"Environment: {'DEBUG' if settings.debug else 'PRODUCTION'}")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="""
        ## ErgoScore Risk Engine API

        Standardised ergonomic risk scores from posture and lifting observations.

        ### Methods:
        - **REBA**: Rapid Entire Body Assessment (1-15)
        - **RULA**: Rapid Upper Limb Assessment (1-8)
        - **OWAS**: Ovako Working Posture Analysis (category 1-4)
        - **NIOSH**: Lifting Equation (RWL and Lifting Index)

        Every assessment returns a risk level, a recommended action and an
        ordered list of workplace corrections, in English or Persian.
        """,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(methods_router)
    app.include_router(assessments_router)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        content = {"detail": "Internal server error"}
        # Exception text only leaves the process in debug mode
        if settings.debug:
            content["error"] = str(exc)
        return JSONResponse(status_code=500, content=content)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("ergoscore.main:app", host="0.0.0.0", port=8000, reload=True)
