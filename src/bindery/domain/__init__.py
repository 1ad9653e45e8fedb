"""
Domain layer - Core models and rules.

This layer contains the fundamental models for binding and resolution.
It has no dependencies on other layers.
"""

from .enums import Lifetime
from .exceptions import (
    ActivationError,
    BindingError,
    CyclicDependencyError,
    DIException,
    LifetimeError,
    MissingBindingError,
    ScopeError,
)
from .identifiers import ServiceId, ServiceToken, declared_dependencies, describe, injectable, token
from .interfaces import IContainer, ILifetimeManager, IResolver
from .models import Binding

__all__ = [
    # Enums
    "Lifetime",
    # Identifiers
    "ServiceId",
    "ServiceToken",
    "token",
    "describe",
    "injectable",
    "declared_dependencies",
    # Exceptions
    "DIException",
    "MissingBindingError",
    "CyclicDependencyError",
    "BindingError",
    "LifetimeError",
    "ScopeError",
    "ActivationError",
    # Interfaces
    "IContainer",
    "IResolver",
    "ILifetimeManager",
    # Models
    "Binding",
]
