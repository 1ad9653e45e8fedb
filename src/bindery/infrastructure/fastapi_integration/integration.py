import logging
from typing import Any, Awaitable, Callable, Hashable

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from bindery.application import RequestScope
from bindery.domain import IContainer, ScopeError

logger = logging.getLogger(__name__)

SCOPE_STATE_ATTRIBUTE = "di_scope"


def provide(container: IContainer, service_id: Hashable) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that resolves from the root container.

    Suitable for transient and singleton bindings. Scoped bindings need a
    request boundary; use :func:`provide_scoped` for those.

    Args:
        container: The container to resolve from.
        service_id: The identifier to resolve when the dependency is called.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> get_user_service = provide(container, TYPES.USER_SERVICE)
        >>>
        >>> @app.get("/users")
        >>> async def list_users(service=Depends(get_user_service)):
        ...     return await service.get_users()
    """

    def dependency() -> Any:
        return container.resolve(service_id)

    return dependency


def get_request_scope(request: Request) -> RequestScope:
    """Return the request scope opened by :class:`RequestScopeMiddleware`.

    Raises:
        ScopeError: If the middleware is not installed.
    """
    scope = getattr(request.state, SCOPE_STATE_ATTRIBUTE, None)
    if scope is None:
        raise ScopeError("Request has no DI scope. Did you forget to add RequestScopeMiddleware?")
    return scope


def provide_scoped(service_id: Hashable) -> Callable[[Request], Any]:
    """Create a FastAPI dependency resolving through the request's scope.

    Each request gets its own instance of scoped bindings. Requires the
    RequestScopeMiddleware to be installed.

    Args:
        service_id: The identifier to resolve.

    Returns:
        A callable that resolves with the request scope as context.

    Example:
        >>> app.add_middleware(RequestScopeMiddleware, container=container)
        >>> get_request_context = provide_scoped(TYPES.REQUEST_CONTEXT)
        >>>
        >>> @app.get("/process")
        >>> async def process(ctx=Depends(get_request_context)):
        ...     return {"request_id": ctx.request_id}
    """

    def scoped_dependency(request: Request) -> Any:
        return get_request_scope(request).resolve(service_id)

    return scoped_dependency


class RequestScopeMiddleware(BaseHTTPMiddleware):
    """Middleware that opens a request scope for each HTTP request.

    The scope is stored on ``request.state.di_scope`` and closed once the
    response has been produced, releasing the request's scoped instances.

    Attributes:
        container: The container to create scopes from.
    """

    def __init__(self, app: FastAPI, container: IContainer):
        super().__init__(app)
        self.container = container

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Open a scope for the request and execute the endpoint.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            The response from the endpoint.
        """
        scope = self.container.create_scope()
        setattr(request.state, SCOPE_STATE_ATTRIBUTE, scope)
        logger.debug("Opened %r for %s %s", scope, request.method, request.url.path)

        try:
            return await call_next(request)
        finally:
            scope.close()
