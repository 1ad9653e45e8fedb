from typing import Any, Callable, Dict, Hashable, Optional

from bindery.domain import Binding, ILifetimeManager, Lifetime, ScopeError, describe


class LifetimeManager(ILifetimeManager):
    """Manages instance lifetimes for singleton, transient, and scoped bindings.

    Attributes:
        _singleton_cache: Instances keyed by service identifier.
        _scoped_cache: Per request boundary, instances keyed by service identifier.
    """

    def __init__(self) -> None:
        self._singleton_cache: Dict[Hashable, Any] = {}
        self._scoped_cache: Dict[Hashable, Dict[Hashable, Any]] = {}

    def get_or_create(
        self,
        binding: Binding,
        request_context: Optional[Hashable],
        factory: Callable[[], Any],
    ) -> Any:
        """Get existing instance or create new one based on lifetime.

        Args:
            binding: The binding being resolved.
            request_context: Request boundary, required for scoped bindings.
            factory: Function to create new instance if needed.

        Returns:
            Instance according to lifetime rules:
            - Singleton: Returns cached instance or creates and caches new one
            - Transient: Always creates new instance
            - Scoped: Returns instance cached for the request boundary or creates one

        Raises:
            ScopeError: If a scoped binding is resolved without a request boundary.
        """
        service_id = binding.service_id

        if binding.lifetime == Lifetime.SINGLETON:
            if service_id not in self._singleton_cache:
                self._singleton_cache[service_id] = factory()
            return self._singleton_cache[service_id]

        if binding.lifetime == Lifetime.SCOPED:
            if request_context is None:
                raise ScopeError(f"Scoped service {describe(service_id)} requires a request context")
            scoped_instances = self._scoped_cache.get(request_context)
            if scoped_instances is not None and service_id in scoped_instances:
                return scoped_instances[service_id]
            instance = factory()
            self._scoped_cache.setdefault(request_context, {})[service_id] = instance
            return instance

        return factory()

    def evict(self, service_id: Hashable) -> None:
        """Discard the singleton and every scoped instance of ``service_id``."""
        self._singleton_cache.pop(service_id, None)
        for scoped_instances in self._scoped_cache.values():
            scoped_instances.pop(service_id, None)

    def release_scope(self, request_context: Hashable) -> None:
        """Discard the scoped instances cached for one request boundary.

        Useful when ending a scope (e.g., end of HTTP request).
        """
        self._scoped_cache.pop(request_context, None)

    def clear_cache(self) -> None:
        """Clear all cached instances (singletons and scoped)."""
        self._singleton_cache.clear()
        self._scoped_cache.clear()

    def has_singleton(self, service_id: Hashable) -> bool:
        return service_id in self._singleton_cache

    def scoped_count(self, request_context: Hashable) -> int:
        return len(self._scoped_cache.get(request_context, {}))
