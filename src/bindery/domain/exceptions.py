from typing import Hashable, Optional, Sequence

from bindery.domain.identifiers import describe


class DIException(Exception):
    """Base exception for DI-related errors."""


class MissingBindingError(DIException):
    """Raised when a service identifier has no binding.

    Attributes:
        service_id: The identifier that could not be found.
    """

    def __init__(self, service_id: Hashable) -> None:
        self.service_id = service_id
        super().__init__(f"No binding registered for service: {describe(service_id)}")


class CyclicDependencyError(DIException):
    """Raised when resolution re-enters an identifier already being resolved.

    Attributes:
        path: Identifiers forming the cycle, first and last entries equal.
    """

    def __init__(self, path: Sequence[Hashable]) -> None:
        self.path = list(path)
        message = f"Cyclic dependency detected: {' -> '.join(describe(service_id) for service_id in self.path)}"
        super().__init__(message)


class BindingError(DIException):
    """Raised for invalid registrations.

    This occurs when:
    - The implementation is not callable.
    - The dependency manifest is malformed.
    """


class LifetimeError(BindingError):
    """Raised when a binding is given an unknown lifetime value."""


class ScopeError(DIException):
    """Raised for invalid scope operations.

    This occurs when:
    - A scoped binding is resolved without a request context.
    - A closed request scope is used for resolution.
    - The request scope middleware is not installed.
    """


class ActivationError(DIException):
    """Raised when an implementation fails while being constructed.

    Attributes:
        service_id: The identifier whose implementation failed.
        reason: Optional description of the failure.
    """

    def __init__(self, service_id: Hashable, reason: Optional[str] = None) -> None:
        self.service_id = service_id
        self.reason = reason
        message = f"Failed to activate service: {describe(service_id)}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)
