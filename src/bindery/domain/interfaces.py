from abc import ABC, abstractmethod
from typing import Any, Callable, Hashable, Iterable, Optional

from bindery.domain.enums import Lifetime
from bindery.domain.models import Binding


class IContainer(ABC):
    """Abstract interface for binding and resolving services."""

    @abstractmethod
    def bind(
        self,
        service_id: Hashable,
        implementation: Callable[..., Any],
        lifetime: Lifetime = Lifetime.TRANSIENT,
        dependencies: Optional[Iterable[Hashable]] = None,
    ) -> None:
        """Register or replace the construction rule for an identifier.

        Args:
            service_id: The identifier to bind.
            implementation: Class or factory producing the instance.
            lifetime: How long the instance should live.
            dependencies: Ordered identifiers injected positionally.
        """

    @abstractmethod
    def unbind(self, service_id: Hashable) -> None:
        """Remove the rule for an identifier.

        Args:
            service_id: The identifier to unbind.
        """

    @abstractmethod
    def resolve(self, service_id: Hashable, request_context: Optional[Hashable] = None) -> Any:
        """Resolve and return an instance for the identifier.

        Args:
            service_id: The identifier to resolve.
            request_context: Request boundary used as the cache key for scoped bindings.
        """

    @abstractmethod
    def create_scope(self) -> Any:
        """Create and return a new request scope bound to this container."""

    @abstractmethod
    def release_scope(self, request_context: Hashable) -> None:
        """Discard every scoped instance cached for a request boundary."""

    @abstractmethod
    def clear(self) -> None:
        """Clear all bindings and cached instances from the container."""


class IResolver(ABC):
    """Abstract interface for building an instance from a binding."""

    @abstractmethod
    def construct(
        self,
        binding: Binding,
        container: IContainer,
        request_context: Optional[Hashable] = None,
    ) -> Any:
        """Resolve the binding's dependencies and call its implementation.

        Args:
            binding: The binding to construct.
            container: The container used to resolve each dependency.
            request_context: Request boundary passed down to nested resolutions.

        Returns:
            The constructed instance.

        Raises:
            ActivationError: If the implementation raises.
        """


class ILifetimeManager(ABC):
    """Abstract interface for managing instance lifetimes."""

    @abstractmethod
    def get_or_create(
        self,
        binding: Binding,
        request_context: Optional[Hashable],
        factory: Callable[[], Any],
    ) -> Any:
        """Get a cached instance or create one according to the binding's lifetime.

        Args:
            binding: The binding being resolved.
            request_context: Request boundary for scoped bindings.
            factory: A callable creating a new instance when needed.
        """

    @abstractmethod
    def evict(self, service_id: Hashable) -> None:
        """Discard every cached instance of an identifier."""

    @abstractmethod
    def release_scope(self, request_context: Hashable) -> None:
        """Discard the scoped instances cached for one request boundary."""

    @abstractmethod
    def clear_cache(self) -> None:
        """Clear every cached instance managed by this lifetime manager."""
