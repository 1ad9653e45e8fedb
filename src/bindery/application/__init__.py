"""
Application layer - Registration and resolution.

This layer orchestrates the domain objects to bind and resolve services.
It depends only on the Domain layer.
"""

from .circular_detector import CircularDependencyDetector
from .container import Container
from .lifetime_manager import LifetimeManager
from .registry import BindingRegistry, coerce_lifetime
from .resolver import DependencyResolver
from .scope import RequestScope

__all__ = [
    "Container",
    "BindingRegistry",
    "DependencyResolver",
    "LifetimeManager",
    "CircularDependencyDetector",
    "RequestScope",
    "coerce_lifetime",
]
