"""
bindery: Explicit binding/resolution container for dependency injection.

Public API exports for the bindery package.
"""

# Application exports
from bindery.application.container import Container
from bindery.application.scope import RequestScope

# Domain exports
from bindery.domain.enums import Lifetime
from bindery.domain.exceptions import (
    ActivationError,
    BindingError,
    CyclicDependencyError,
    DIException,
    LifetimeError,
    MissingBindingError,
    ScopeError,
)
from bindery.domain.identifiers import ServiceToken, injectable, token

__version__ = "0.1.0"

__all__ = [
    # Container
    "Container",
    "RequestScope",
    # Enums
    "Lifetime",
    # Identifiers
    "ServiceToken",
    "token",
    "injectable",
    # Exceptions
    "DIException",
    "MissingBindingError",
    "CyclicDependencyError",
    "BindingError",
    "LifetimeError",
    "ScopeError",
    "ActivationError",
]
