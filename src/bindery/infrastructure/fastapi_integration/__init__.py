"""
FastAPI integration module.

Provides helpers for serving bindery containers from FastAPI applications.
"""

from .integration import RequestScopeMiddleware, get_request_scope, provide, provide_scoped

__all__ = [
    "provide",
    "provide_scoped",
    "get_request_scope",
    "RequestScopeMiddleware",
]
