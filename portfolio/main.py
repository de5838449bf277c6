"""Main FastAPI application entry point"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio.api.dependencies import create_project_store
from portfolio.api.errors import register_error_handlers
from portfolio.api.health import API_VERSION, router as health_router
from portfolio.api.projects import init_router, router as projects_router
from portfolio.config import settings
from portfolio.services.project_store import StoreError

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the project store on startup and release it on shutdown"""
    app_settings = app.state.settings
    store = create_project_store(app_settings)
    app.state.project_store = store
    logger.info(f"Using {store.backend_name} project store ({store.mode.value})")

    if app_settings.initialize_on_startup:
        try:
            await store.initialize()
        except StoreError as e:
            logger.error(f"Project store initialization failed: {e}")

    yield

    await store.close()


app = FastAPI(
    title="Portfolio Projects API",
    description="Backend API for the portfolio site and its project admin",
    version=API_VERSION,
    lifespan=lifespan,
)
app.state.settings = settings

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
    max_age=3600,
)

register_error_handlers(app)

# Include routers
app.include_router(health_router)
app.include_router(init_router)
app.include_router(projects_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Portfolio Projects API",
        "version": API_VERSION,
        "status": "running",
    }
