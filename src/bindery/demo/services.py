import logging
import uuid
from typing import List

from bindery.demo.models import User
from bindery.demo.settings import DemoSettings
from bindery.demo.service_ids import TYPES
from bindery.domain import injectable

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """Keeps users in a list for the lifetime of the instance."""

    def __init__(self) -> None:
        self._users: List[User] = []

    async def save(self, user: User) -> None:
        self._users.append(user)

    async def get_all(self) -> List[User]:
        return list(self._users)


@injectable(TYPES.SETTINGS)
class LoggingEmailService:
    """Pretends to send email by logging it and remembering the recipient."""

    def __init__(self, settings: DemoSettings) -> None:
        self.sender = settings.sender_address
        self.sent: List[str] = []

    async def send_email(self, address: str) -> None:
        logger.info("Sending email from %s to %s", self.sender, address)
        self.sent.append(address)


@injectable(TYPES.USER_REPOSITORY, TYPES.EMAIL_SERVICE)
class UserService:
    def __init__(self, repository: InMemoryUserRepository, email_service: LoggingEmailService) -> None:
        self.repository = repository
        self.email_service = email_service

    async def create_user(self, name: str, email: str) -> User:
        """Store a new user, then send them a notification email."""
        user = User(name=name, email=email)

        await self.repository.save(user)
        await self.email_service.send_email(email)

        return user

    async def get_users(self) -> List[User]:
        return await self.repository.get_all()


class RequestContext:
    """Per-request state, one instance per request scope."""

    def __init__(self) -> None:
        self.request_id = uuid.uuid4().hex
