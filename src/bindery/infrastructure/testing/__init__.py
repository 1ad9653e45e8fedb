"""
Testing utilities module.

Provides helpers for testing applications wired with bindery.
"""

from .utilities import MockScope, TestContainer, create_mock_container

__all__ = [
    "TestContainer",
    "create_mock_container",
    "MockScope",
]
