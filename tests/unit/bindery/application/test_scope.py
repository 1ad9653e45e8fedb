"""Unit tests for RequestScope."""

from unittest.mock import MagicMock

import pytest

from bindery.application.container import Container
from bindery.application.scope import RequestScope
from bindery.domain import IContainer, Lifetime, ScopeError


class TestRequestScope:
    """Test cases for the request boundary object."""

    def test_resolve_passes_itself_as_context(self):
        """Test that the scope is the request context."""
        container = MagicMock(spec=IContainer)
        scope = RequestScope(container)

        scope.resolve("svc")

        container.resolve.assert_called_once_with("svc", request_context=scope)

    def test_close_releases_scope_once(self):
        """Test that closing releases the scope exactly once."""
        container = MagicMock(spec=IContainer)
        scope = RequestScope(container)

        scope.close()
        scope.close()

        container.release_scope.assert_called_once_with(scope)
        assert scope.closed

    def test_resolve_after_close_raises(self):
        """Test that a closed scope cannot resolve."""
        scope = RequestScope(MagicMock(spec=IContainer))
        scope.close()

        with pytest.raises(ScopeError, match="closed"):
            scope.resolve("svc")

    def test_context_manager_closes(self):
        """Test that leaving the with-block closes the scope."""
        container = MagicMock(spec=IContainer)

        with RequestScope(container) as scope:
            assert not scope.closed

        assert scope.closed
        container.release_scope.assert_called_once_with(scope)

    def test_context_manager_does_not_swallow_exceptions(self):
        """Test that errors inside the block propagate."""
        with pytest.raises(RuntimeError):
            with RequestScope(MagicMock(spec=IContainer)):
                raise RuntimeError("boom")

    def test_scopes_have_distinct_ids(self):
        """Test that every scope gets its own id."""
        container = MagicMock(spec=IContainer)
        assert RequestScope(container).scope_id != RequestScope(container).scope_id

    def test_repr_shows_state(self):
        """Test the diagnostic representation."""
        scope = RequestScope(MagicMock(spec=IContainer))
        assert "open" in repr(scope)
        scope.close()
        assert "closed" in repr(scope)


class TestRequestScopeWithContainer:
    """Test cases for scopes resolving through a real container."""

    def test_scoped_instances_shared_within_scope(self):
        """Test instance sharing inside one scope and isolation across scopes."""
        container = Container()
        container.bind("ctx", object, Lifetime.SCOPED)

        with container.create_scope() as first, container.create_scope() as second:
            assert first.resolve("ctx") is first.resolve("ctx")
            assert first.resolve("ctx") is not second.resolve("ctx")

    def test_closing_releases_instances(self):
        """Test that closing a scope empties its cache."""
        container = Container()
        container.bind("ctx", object, Lifetime.SCOPED)

        with container.create_scope() as scope:
            scope.resolve("ctx")
            assert container._lifetime_manager.scoped_count(scope) == 1

        assert container._lifetime_manager.scoped_count(scope) == 0

    def test_scope_resolves_singletons_from_container(self):
        """Test that singletons are shared across scopes."""
        container = Container()
        container.bind("config", object, Lifetime.SINGLETON)

        with container.create_scope() as first, container.create_scope() as second:
            assert first.resolve("config") is second.resolve("config")
            assert first.resolve("config") is container.resolve("config")
