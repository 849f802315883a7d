"""
API v1 package.

Contains versioned API routes for the credential API.
"""

from passgate.api.v1.routes import router

__all__ = ["router"]
