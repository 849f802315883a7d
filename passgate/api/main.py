"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from passgate.adapters.hashing.bcrypt_secrets import BcryptSecretManager
from passgate.adapters.repository import InMemoryCredentialStore
from passgate.api.v1 import router as v1_router
from passgate.config.settings import get_settings
from passgate.domain.accounts import AccountService
from passgate.domain.exceptions import InternalError

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Credential API v1 - Register accounts and verify logins",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the credential store and account service on startup
    - Drops all stored records on shutdown
    """
    settings = get_settings()
    logging.getLogger("passgate").setLevel(settings.log_level.upper())

    logger.info("Starting application...")

    store = InMemoryCredentialStore()
    secrets = BcryptSecretManager(cost=settings.bcrypt_cost)

    # Store service in app state for dependency injection
    app.state.store = store
    app.state.account_service = AccountService(store=store, secrets=secrets)

    logger.info("Application startup complete (bcrypt cost %d)", settings.bcrypt_cost)

    yield

    # Shutdown
    logger.info("Shutting down application...")
    store.close()


app = FastAPI(
    title="passgate",
    description="Credential API - Register accounts and verify logins against stored credentials",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.exception_handler(InternalError)
async def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
    """Report unrecoverable core failures without leaking details."""
    logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal error"},
    )


@app.get("/health")
async def health_check(request: Request) -> dict[str, str | int]:
    """
    Health check endpoint.

    Returns 200 OK with the number of registered accounts.
    """
    store = request.app.state.store
    return {"status": "healthy", "accounts": store.count()}
