"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
the account service into routes.
"""

from fastapi import Request

from passgate.domain.accounts import AccountService


def get_account_service(request: Request) -> AccountService:
    """
    Get account service from app state.

    The service and the credential store it owns are created during
    app lifespan startup and stored in app.state.
    """
    return request.app.state.account_service
