import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from bindery.application import Container
from bindery.demo.logging_config import configure_logging
from bindery.demo.models import User, UserCreate
from bindery.demo.service_ids import TYPES
from bindery.demo.services import RequestContext, UserService
from bindery.demo.settings import DemoSettings, get_settings
from bindery.demo.wiring import build_container
from bindery.domain import DIException
from bindery.infrastructure.fastapi_integration import RequestScopeMiddleware, provide, provide_scoped

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def create_app(container: Optional[Container] = None, settings: Optional[DemoSettings] = None) -> FastAPI:
    """Build the demo FastAPI application.

    Args:
        container: Container to serve from. Defaults to ``build_container(settings)``.
        settings: Demo settings. Defaults to the environment-loaded settings.
    """
    settings = settings if settings is not None else get_settings()
    configure_logging(settings.log_level)
    container = container if container is not None else build_container(settings)

    app = FastAPI(title=settings.app_title)
    app.state.container = container
    app.add_middleware(RequestScopeMiddleware, container=container)

    get_user_service = provide(container, TYPES.USER_SERVICE)
    get_request_context = provide_scoped(TYPES.REQUEST_CONTEXT)

    @app.exception_handler(DIException)
    async def di_exception_handler(request: Request, exc: DIException) -> JSONResponse:
        logger.error("Dependency resolution failed for %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {"status": "ok", "bindings": container.describe_bindings()}

    @app.get("/users", response_model=List[User])
    async def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
        return await service.get_users()

    @app.post("/users", response_model=User, status_code=status.HTTP_201_CREATED)
    async def create_user(
        payload: UserCreate,
        response: Response,
        service: UserService = Depends(get_user_service),
        context: RequestContext = Depends(get_request_context),
    ) -> User:
        user = await service.create_user(payload.name, payload.email)
        logger.info("Created user %s in request %s", user.id, context.request_id)
        response.headers[REQUEST_ID_HEADER] = context.request_id
        return user

    return app
