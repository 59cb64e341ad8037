"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from idea_validator.config import get_settings
from idea_validator.routers import (
    health_router,
    ideas_router,
    analytics_router,
)
from idea_validator.services import get_snowflake_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    logger.info("Starting Idea Validator...")
    settings = get_settings()
    logger.info(f"Environment: {'DEBUG' if settings.debug else 'PRODUCTION'}")
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; idea validation will fail")
    if not settings.sheet_webhook_url:
        logger.warning("SHEET_WEBHOOK_URL is not set; sheet export is disabled")
    yield
    # Shutdown
    logger.info("Shutting down Idea Validator...")
    get_snowflake_service().disconnect()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    
    app = FastAPI(
        title=settings.app_name,
        description="""
        ## Idea Validator API
        
        AI-assisted evaluation of product ideas
        
        ### Features:
        - Idea scoring, key developments, deployment steps, quarterly roadmap
          and investor pitch from a generative model
        - Per-user idea history
        - Portfolio analytics: score trends, plan taxonomies, roadmap
          priorities, pitch analytics, market, financial and competitive views
        """,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    app.include_router(health_router)
    app.include_router(ideas_router)
    app.include_router(analytics_router)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error": str(exc)}
        )
    
    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("idea_validator.main:app", host="0.0.0.0", port=8000, reload=True)
