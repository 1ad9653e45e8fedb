"""
Demo application - a toy user service wired through a bindery container.

Creates and lists users in memory and sends a notification email on creation.
"""

from .app import create_app
from .wiring import TYPES, build_container

__all__ = [
    "TYPES",
    "build_container",
    "create_app",
]
