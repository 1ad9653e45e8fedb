"""Unit tests for domain exceptions."""

import pytest

from bindery.domain import token
from bindery.domain.exceptions import (
    ActivationError,
    BindingError,
    CyclicDependencyError,
    DIException,
    LifetimeError,
    MissingBindingError,
    ScopeError,
)


class TestDIException:
    """Test cases for the base DIException class."""

    def test_di_exception_is_exception(self):
        """Test that DIException inherits from Exception."""
        assert issubclass(DIException, Exception)

    def test_di_exception_can_be_raised(self):
        """Test that DIException can be raised with a message."""
        with pytest.raises(DIException, match="Test error"):
            raise DIException("Test error")

    @pytest.mark.parametrize(
        "exception_class",
        [MissingBindingError, CyclicDependencyError, BindingError, LifetimeError, ScopeError, ActivationError],
    )
    def test_all_errors_inherit_from_di_exception(self, exception_class):
        """Test that every library error is a DIException."""
        assert issubclass(exception_class, DIException)


class TestMissingBindingError:
    """Test cases for MissingBindingError."""

    def test_names_the_identifier(self):
        """Test that the message and attribute name the missing identifier."""
        error = MissingBindingError("mailer")
        assert error.service_id == "mailer"
        assert str(error) == "No binding registered for service: mailer"

    def test_names_a_token(self):
        """Test that tokens are rendered by name."""
        error = MissingBindingError(token("tests.MissingRepo"))
        assert "tests.MissingRepo" in str(error)

    def test_names_a_class(self):
        """Test that classes are rendered by name."""

        class Repo:
            pass

        assert "Repo" in str(MissingBindingError(Repo))


class TestCyclicDependencyError:
    """Test cases for CyclicDependencyError."""

    def test_message_shows_cycle_path(self):
        """Test that the message joins the path with arrows."""
        error = CyclicDependencyError(["A", "B", "A"])
        assert str(error) == "Cyclic dependency detected: A -> B -> A"

    def test_path_attribute_is_list(self):
        """Test that the path is stored as a list."""
        error = CyclicDependencyError(("A", "A"))
        assert error.path == ["A", "A"]

    def test_path_with_classes(self):
        """Test class names in the path."""

        class ServiceA:
            pass

        class ServiceB:
            pass

        error = CyclicDependencyError([ServiceA, ServiceB, ServiceA])
        assert "ServiceA -> ServiceB -> ServiceA" in str(error)


class TestLifetimeError:
    """Test cases for LifetimeError."""

    def test_lifetime_error_is_binding_error(self):
        """Test that LifetimeError is a kind of BindingError."""
        assert issubclass(LifetimeError, BindingError)


class TestActivationError:
    """Test cases for ActivationError."""

    def test_message_without_reason(self):
        """Test message with only the identifier."""
        error = ActivationError("repo")
        assert str(error) == "Failed to activate service: repo"
        assert error.reason is None

    def test_message_with_reason(self):
        """Test message including the reason."""
        error = ActivationError("repo", "boom")
        assert str(error) == "Failed to activate service: repo. Reason: boom"
        assert error.service_id == "repo"
