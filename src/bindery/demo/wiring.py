from typing import Optional

from bindery.application import Container
from bindery.demo.services import InMemoryUserRepository, LoggingEmailService, RequestContext, UserService
from bindery.demo.settings import DemoSettings, get_settings
from bindery.demo.service_ids import TYPES
from bindery.domain import Lifetime


def build_container(settings: Optional[DemoSettings] = None) -> Container:
    """Bind the demo services.

    The repository is a singleton so every user service shares one user list;
    the email and user services are transient.
    """
    settings = settings if settings is not None else get_settings()
    container = Container()

    container.bind(TYPES.SETTINGS, lambda: settings, Lifetime.SINGLETON)
    container.bind(TYPES.USER_REPOSITORY, InMemoryUserRepository, Lifetime.SINGLETON)
    container.bind(TYPES.EMAIL_SERVICE, LoggingEmailService)
    container.bind(TYPES.USER_SERVICE, UserService)
    container.bind(TYPES.REQUEST_CONTEXT, RequestContext, Lifetime.SCOPED)

    return container
