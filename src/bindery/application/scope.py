import itertools
from typing import TYPE_CHECKING, Any, Hashable

from bindery.domain import ScopeError

if TYPE_CHECKING:
    from bindery.domain import IContainer

_scope_ids = itertools.count(1)


class RequestScope:
    """A request boundary bound to one container.

    Scoped bindings resolved through the same scope share one instance.
    Closing the scope releases those instances from the container.

    Example:
        >>> with container.create_scope() as scope:
        ...     ctx1 = scope.resolve(TYPES.REQUEST_CONTEXT)
        ...     ctx2 = scope.resolve(TYPES.REQUEST_CONTEXT)
        ...     assert ctx1 is ctx2
    """

    def __init__(self, container: "IContainer") -> None:
        self._container = container
        self._closed = False
        self.scope_id = next(_scope_ids)

    @property
    def closed(self) -> bool:
        return self._closed

    def resolve(self, service_id: Hashable) -> Any:
        """Resolve ``service_id`` with this scope as the request context.

        Raises:
            ScopeError: If the scope has been closed.
        """
        if self._closed:
            raise ScopeError(f"Request scope #{self.scope_id} is closed")
        return self._container.resolve(service_id, request_context=self)

    def close(self) -> None:
        """Release every scoped instance created within this scope."""
        if not self._closed:
            self._closed = True
            self._container.release_scope(self)

    def __enter__(self) -> "RequestScope":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.close()
        return False

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<RequestScope #{self.scope_id} {state}>"
