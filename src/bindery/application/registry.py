import logging
from typing import Any, Callable, Dict, Hashable, Iterable, Optional, Union

from pydantic import ValidationError

from bindery.domain import (
    Binding,
    BindingError,
    Lifetime,
    LifetimeError,
    MissingBindingError,
    declared_dependencies,
    describe,
)

logger = logging.getLogger(__name__)


def coerce_lifetime(lifetime: Union[Lifetime, str]) -> Lifetime:
    """Return the ``Lifetime`` for an enum member or its string value.

    Raises:
        LifetimeError: If the value names no lifetime.
    """
    try:
        return Lifetime(lifetime)
    except ValueError as e:
        allowed = ", ".join(member.value for member in Lifetime)
        raise LifetimeError(f"Unknown lifetime {lifetime!r}, expected one of: {allowed}") from e


class BindingRegistry:
    """Stores one binding per service identifier.

    Rebinding an identifier replaces its previous rule. The registry holds
    rules only; cached instances live in the lifetime manager.

    Attributes:
        _bindings: Dictionary mapping service identifiers to their bindings.
    """

    def __init__(self) -> None:
        self._bindings: Dict[Hashable, Binding] = {}

    def bind(
        self,
        service_id: Hashable,
        implementation: Callable[..., Any],
        lifetime: Union[Lifetime, str] = Lifetime.TRANSIENT,
        dependencies: Optional[Iterable[Hashable]] = None,
    ) -> Optional[Binding]:
        """Register or replace the rule for ``service_id``.

        Args:
            service_id: The identifier to bind.
            implementation: Class or factory producing the instance.
            lifetime: Lifetime member or its string value.
            dependencies: Ordered identifiers to inject. Defaults to the
                manifest attached with ``@injectable``.

        Returns:
            The binding that was replaced, or None.

        Raises:
            BindingError: If the implementation is not callable or the
                dependencies are given as a single string.
            LifetimeError: If the lifetime is unknown.
        """
        if not callable(implementation):
            raise BindingError(
                f"Implementation for {describe(service_id)} must be callable, got {type(implementation).__name__}"
            )

        resolved_lifetime = coerce_lifetime(lifetime)
        if dependencies is None:
            dependencies = declared_dependencies(implementation)
        elif isinstance(dependencies, (str, bytes)):
            raise BindingError(
                f"Dependencies for {describe(service_id)} must be a sequence of identifiers, not a single string"
            )

        try:
            binding = Binding(
                service_id=service_id,
                implementation=implementation,
                dependencies=tuple(dependencies),
                lifetime=resolved_lifetime,
            )
        except ValidationError as e:
            raise BindingError(f"Invalid binding for {describe(service_id)}: {e}") from e

        previous = self._bindings.get(service_id)
        self._bindings[service_id] = binding

        if previous is None:
            logger.debug("Bound %s as %s", describe(service_id), resolved_lifetime)
        else:
            logger.debug("Rebound %s as %s (was %s)", describe(service_id), resolved_lifetime, previous.lifetime)
        return previous

    def unbind(self, service_id: Hashable) -> Binding:
        """Remove the rule for ``service_id``.

        Returns:
            The removed binding.

        Raises:
            MissingBindingError: If the identifier is not bound.
        """
        if service_id not in self._bindings:
            raise MissingBindingError(service_id)
        logger.debug("Unbound %s", describe(service_id))
        return self._bindings.pop(service_id)

    def get(self, service_id: Hashable) -> Binding:
        """Return the binding for ``service_id``.

        Raises:
            MissingBindingError: If the identifier is not bound.
        """
        try:
            return self._bindings[service_id]
        except KeyError:
            raise MissingBindingError(service_id) from None

    def is_bound(self, service_id: Hashable) -> bool:
        return service_id in self._bindings

    def snapshot(self) -> Dict[Hashable, Binding]:
        """Get a shallow copy of the bindings."""
        return self._bindings.copy()

    def load(self, bindings: Dict[Hashable, Binding]) -> None:
        """Replace every binding with a copy of ``bindings``."""
        self._bindings = dict(bindings)

    def clear(self) -> None:
        self._bindings.clear()

    def __contains__(self, service_id: Hashable) -> bool:
        return self.is_bound(service_id)

    def __len__(self) -> int:
        return len(self._bindings)
