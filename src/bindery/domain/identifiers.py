"""Service identifiers and dependency manifests."""

import threading
from typing import Any, Callable, Dict, Hashable, Tuple, TypeVar

ServiceId = Hashable

F = TypeVar("F", bound=Callable[..., Any])

INJECT_ATTRIBUTE = "__inject__"


class ServiceToken:
    """Opaque named key for a capability contract.

    Tokens compare by identity. Use :func:`token` to get the shared token for
    a name instead of constructing one directly.
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"ServiceToken({self.name!r})"

    def __str__(self) -> str:
        return self.name


_tokens: Dict[str, ServiceToken] = {}
_tokens_lock = threading.Lock()


def token(name: str) -> ServiceToken:
    """Return the process-wide token registered under ``name``.

    Example:
        >>> token("UserRepository") is token("UserRepository")
        True
    """
    with _tokens_lock:
        if name not in _tokens:
            _tokens[name] = ServiceToken(name)
        return _tokens[name]


def describe(service_id: ServiceId) -> str:
    """Human readable name of a service identifier, used in error messages."""
    if isinstance(service_id, type):
        return service_id.__name__
    return str(service_id)


def injectable(*dependencies: ServiceId) -> Callable[[F], F]:
    """Attach an ordered dependency manifest to a class or factory.

    The container passes the resolved dependencies positionally, in the
    declared order.

    Example:
        >>> @injectable(TYPES.USER_REPOSITORY, TYPES.EMAIL_SERVICE)
        ... class UserService:
        ...     def __init__(self, repository, email_service): ...
    """

    def decorator(target: F) -> F:
        setattr(target, INJECT_ATTRIBUTE, tuple(dependencies))
        return target

    return decorator


def declared_dependencies(implementation: Callable[..., Any]) -> Tuple[ServiceId, ...]:
    """Return the manifest attached to ``implementation`` itself.

    A class only uses its own manifest; subclasses do not inherit their
    parent's, since they may have a different constructor.
    """
    if isinstance(implementation, type):
        return tuple(vars(implementation).get(INJECT_ATTRIBUTE, ()))
    return tuple(getattr(implementation, INJECT_ATTRIBUTE, ()))
