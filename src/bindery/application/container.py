import logging
import threading
from typing import Any, Callable, Dict, Hashable, Iterable, Optional, Union

from bindery.application.circular_detector import CircularDependencyDetector
from bindery.application.lifetime_manager import LifetimeManager
from bindery.application.registry import BindingRegistry
from bindery.application.resolver import DependencyResolver
from bindery.application.scope import RequestScope
from bindery.domain import (
    Binding,
    IContainer,
    ILifetimeManager,
    IResolver,
    Lifetime,
    ScopeError,
    describe,
)

logger = logging.getLogger(__name__)


class Container(IContainer):
    """Main dependency injection container.

    Owns the binding registry and the instance caches, and walks the
    dependency graph on resolution. Supports transient, singleton and scoped
    lifetimes. Every identifier must be bound explicitly; there is no
    auto-binding of unregistered classes.

    All public operations run under one re-entrant lock per container, so a
    singleton is constructed at most once even when first resolved from
    several threads.

    Attributes:
        _registry: Binding rules keyed by service identifier.
        _resolver: Component constructing instances from bindings.
        _lifetime_manager: Component caching singleton and scoped instances.
        _circular_detector: Component detecting cycles in the resolution stack.
        _resolution_counts: Number of successful resolutions per identifier.
        _lock: Guards the registry and the caches.
    """

    def __init__(self) -> None:
        """Initialize the container with an empty registry and caches."""
        self._registry = BindingRegistry()
        self._resolver: IResolver = DependencyResolver()
        self._lifetime_manager: ILifetimeManager = LifetimeManager()
        self._circular_detector = CircularDependencyDetector()
        self._resolution_counts: Dict[Hashable, int] = {}
        self._lock = threading.RLock()

    def bind(
        self,
        service_id: Hashable,
        implementation: Callable[..., Any],
        lifetime: Union[Lifetime, str] = Lifetime.TRANSIENT,
        dependencies: Optional[Iterable[Hashable]] = None,
    ) -> None:
        """Register or replace the construction rule for ``service_id``.

        Any instance cached for the identifier under its previous rule is
        discarded, so the next resolution uses the new rule.

        Args:
            service_id: The identifier to bind (string, token or class).
            implementation: Class or factory called with the resolved dependencies.
            lifetime: How long the instance should live.
            dependencies: Ordered identifiers injected positionally. Defaults to
                the manifest attached with ``@injectable``.

        Raises:
            BindingError: If the implementation is not callable or the
                dependencies are given as a single string.
            LifetimeError: If the lifetime is unknown.

        Example:
            >>> container.bind(TYPES.USER_REPOSITORY, InMemoryUserRepository, Lifetime.SINGLETON)
            >>> container.bind(
            ...     TYPES.USER_SERVICE,
            ...     UserService,
            ...     dependencies=[TYPES.USER_REPOSITORY, TYPES.EMAIL_SERVICE],
            ... )
        """
        with self._lock:
            self._registry.bind(service_id, implementation, lifetime, dependencies)
            self._lifetime_manager.evict(service_id)
            self._resolution_counts.pop(service_id, None)

    def bind_many(
        self,
        implementations: Dict[Hashable, Callable[..., Any]],
        lifetime: Union[Lifetime, str] = Lifetime.TRANSIENT,
    ) -> None:
        """Bind several identifiers with the same lifetime.

        Dependencies come from each implementation's ``@injectable`` manifest.

        Example:
            >>> container.bind_many({
            ...     TYPES.CONFIG: load_config,
            ...     TYPES.DATABASE: DatabaseConnection,
            ... }, Lifetime.SINGLETON)
        """
        with self._lock:
            for service_id, implementation in implementations.items():
                self.bind(service_id, implementation, lifetime)

    def unbind(self, service_id: Hashable) -> None:
        """Remove the rule for ``service_id`` and discard its cached instances.

        Raises:
            MissingBindingError: If the identifier is not bound.
        """
        with self._lock:
            self._registry.unbind(service_id)
            self._lifetime_manager.evict(service_id)
            self._resolution_counts.pop(service_id, None)

    def is_bound(self, service_id: Hashable) -> bool:
        with self._lock:
            return self._registry.is_bound(service_id)

    def get_binding(self, service_id: Hashable) -> Binding:
        """Return the active binding for ``service_id``.

        Raises:
            MissingBindingError: If the identifier is not bound.
        """
        with self._lock:
            return self._registry.get(service_id)

    def resolve(self, service_id: Hashable, request_context: Optional[Hashable] = None) -> Any:
        """Resolve and return an instance for ``service_id``.

        Walks the dependency graph depth-first in declaration order,
        constructing leaves first, and caches instances per lifetime.

        Args:
            service_id: The identifier to resolve.
            request_context: Request boundary used as the cache key for scoped
                bindings. Passed down to every nested resolution.

        Returns:
            Instance with all dependencies injected.

        Raises:
            MissingBindingError: If the identifier or a dependency is not bound.
            CyclicDependencyError: If the identifier is re-entered while being resolved.
            ScopeError: If a scoped binding is reached without a request context,
                or the request context is a closed RequestScope.
            ActivationError: If an implementation raises while being constructed.

        Example:
            >>> user_service = container.resolve(TYPES.USER_SERVICE)
        """
        if isinstance(request_context, RequestScope) and request_context.closed:
            raise ScopeError(f"Request scope #{request_context.scope_id} is closed")

        with self._lock:
            self._circular_detector.push((service_id, request_context))

            try:
                binding = self._registry.get(service_id)
                instance = self._lifetime_manager.get_or_create(
                    binding,
                    request_context,
                    lambda: self._resolver.construct(binding, self, request_context),
                )
                self._resolution_counts[service_id] = self._resolution_counts.get(service_id, 0) + 1
                return instance

            finally:
                self._circular_detector.pop()

    def resolution_count(self, service_id: Hashable) -> int:
        """Number of successful resolutions of ``service_id`` since it was bound."""
        with self._lock:
            return self._resolution_counts.get(service_id, 0)

    def create_scope(self) -> RequestScope:
        """Create a request boundary for scoped lifetimes.

        Returns:
            A new scope resolving through this container. Close it (or use it as
            a context manager) to release its scoped instances.

        Example:
            >>> with container.create_scope() as scope:
            ...     handler = scope.resolve(TYPES.REQUEST_HANDLER)
        """
        return RequestScope(self)

    def release_scope(self, request_context: Hashable) -> None:
        """Discard every scoped instance cached for ``request_context``."""
        with self._lock:
            self._lifetime_manager.release_scope(request_context)
            logger.debug("Released request scope %r", request_context)

    def get_registry_copy(self) -> Dict[Hashable, Binding]:
        """Get a copy of the bindings, used to seed derived containers."""
        with self._lock:
            return self._registry.snapshot()

    def set_registry(self, bindings: Dict[Hashable, Binding]) -> None:
        """Replace all bindings and drop every cached instance.

        Args:
            bindings: Bindings to install, typically from ``get_registry_copy``.
        """
        with self._lock:
            self._registry.load(bindings)
            self._lifetime_manager.clear_cache()
            self._resolution_counts.clear()

    def clear(self) -> None:
        """Clear all bindings and cached instances.

        Useful for testing or resetting the container state.
        """
        with self._lock:
            self._registry.clear()
            self._lifetime_manager.clear_cache()
            self._circular_detector.clear()
            self._resolution_counts.clear()

    def __contains__(self, service_id: Hashable) -> bool:
        return self.is_bound(service_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)

    def __repr__(self) -> str:
        return f"<Container bindings={len(self)}>"

    def describe_bindings(self) -> Dict[str, str]:
        """Map each bound identifier's name to its lifetime, for diagnostics."""
        with self._lock:
            return {
                describe(service_id): binding.lifetime.value
                for service_id, binding in self._registry.snapshot().items()
            }
