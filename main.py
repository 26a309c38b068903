"""
PantryKeeper FastAPI Application
Main entry point: application factory, middleware, and configuration wiring
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

# Import routes
from api.routes import (
    health,
    profiles,
    pantry,
    shopping,
    meal_plans,
    recipes,
    assistant,
    food,
    recognition,
    notifications,
)

# Import adapters
from adapters import mongo_adapter
from adapters.auth_adapter import TokenVerifier
from adapters.document_store import DocumentStore
from adapters.food_database_adapter import FoodDatabaseClient
from adapters.llm_adapter import LanguageModelClient

# Import configuration
from app.config import Settings, settings as default_settings
from app.scheduler import ExpiryCheckScheduler

# Import middleware
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    app_exception_handler,
    general_exception_handler,
)
from api.security import AuthenticationMiddleware
from app.exceptions import PantryKeeperError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, default_settings.log_level.upper()),
    format=default_settings.log_format,
)
_logger = logging.getLogger("pantrykeeper.main")

DOC_PATHS = ("/docs", "/docs/oauth2-redirect", "/redoc", "/openapi.json")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Connects the document store (unless one was injected) and starts the
    expiry check scheduler.
    """
    settings: Settings = app.state.settings
    _logger.info(f"Starting PantryKeeper in {settings.environment.value} mode")

    owns_store = app.state.store is None
    if owns_store:
        # Run blocking connect in a thread to avoid blocking the event loop
        app.state.store = await anyio.to_thread.run_sync(
            mongo_adapter.connect,
            settings.mongo_uri,
            settings.mongo_db_name,
            settings.mongo_timeout_ms,
        )
        _logger.info("MongoDB connection established")

    scheduler: Optional[ExpiryCheckScheduler] = None
    if settings.expiry_check_enabled:
        scheduler = ExpiryCheckScheduler(lambda: app.state.store, settings)
        scheduler.start()

    try:
        yield
    finally:
        # Shutdown: stop jobs, then close connections
        _logger.info("Shutting down PantryKeeper")
        if scheduler is not None:
            scheduler.shutdown()
        if owns_store:
            app.state.store.close()
            _logger.info("MongoDB connection closed")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
    token_verifier: Optional[TokenVerifier] = None,
    llm: Optional[LanguageModelClient] = None,
    food_db: Optional[FoodDatabaseClient] = None,
) -> FastAPI:
    """
    Build the application.

    Any client left as None is created from settings; the document store is
    connected on startup.
    """
    settings = settings or default_settings
    show_docs = not settings.is_production()

    app = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url="/openapi.json" if show_docs else None,
        docs_url="/docs" if show_docs else None,
        redoc_url="/redoc" if show_docs else None,
    )

    app.state.settings = settings
    app.state.store = store
    app.state.token_verifier = token_verifier or TokenVerifier.from_settings(settings)
    app.state.llm = llm or LanguageModelClient.from_settings(settings)
    app.state.food_db = food_db or FoodDatabaseClient.from_settings(settings)

    # Middleware added last runs first: logging -> CORS -> authentication
    exempt = list(settings.auth_exempt_paths) + (list(DOC_PATHS) if show_docs else [])
    app.add_middleware(AuthenticationMiddleware, exempt_paths=exempt)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(PantryKeeperError, app_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(profiles.router)
    app.include_router(pantry.router)
    app.include_router(shopping.router)
    app.include_router(meal_plans.router)
    app.include_router(recipes.router)
    app.include_router(assistant.router)
    app.include_router(food.router)
    app.include_router(recognition.router)
    app.include_router(notifications.router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )
