"""Unit tests for the demo services."""

import pytest
from pydantic import ValidationError

from bindery.demo.models import ID_ALPHABET, ID_LENGTH, User, UserCreate, new_user_id
from bindery.demo.services import InMemoryUserRepository, LoggingEmailService, RequestContext, UserService
from bindery.demo.settings import DemoSettings


class TestModels:
    """Test cases for demo models."""

    def test_new_user_id_is_base36(self):
        """Test the shape of generated ids."""
        user_id = new_user_id()
        assert len(user_id) == ID_LENGTH
        assert set(user_id) <= set(ID_ALPHABET)

    def test_user_gets_generated_id(self):
        """Test that users get an id by default."""
        user = User(name="Ada", email="ada@example.com")
        assert len(user.id) == ID_LENGTH

    @pytest.mark.parametrize("payload", [{"name": "", "email": "a@b.c"}, {"name": "Ada", "email": "   "}])
    def test_user_create_rejects_blank_fields(self, payload):
        """Test that blank names and emails are rejected."""
        with pytest.raises(ValidationError):
            UserCreate(**payload)


class TestInMemoryUserRepository:
    """Test cases for the in-memory repository."""

    @pytest.mark.asyncio
    async def test_save_and_get_all(self):
        """Test that saved users are listed in insertion order."""
        repository = InMemoryUserRepository()
        ada = User(name="Ada", email="ada@example.com")
        alan = User(name="Alan", email="alan@example.com")

        await repository.save(ada)
        await repository.save(alan)

        assert await repository.get_all() == [ada, alan]

    @pytest.mark.asyncio
    async def test_get_all_returns_copy(self):
        """Test that callers cannot mutate the stored list."""
        repository = InMemoryUserRepository()
        await repository.save(User(name="Ada", email="ada@example.com"))

        users = await repository.get_all()
        users.clear()

        assert len(await repository.get_all()) == 1


class TestLoggingEmailService:
    """Test cases for the logging email service."""

    @pytest.mark.asyncio
    async def test_send_email_records_and_logs(self, caplog):
        """Test that sending logs the recipient and remembers it."""
        service = LoggingEmailService(DemoSettings(sender_address="team@example.com"))

        with caplog.at_level("INFO", logger="bindery.demo.services"):
            await service.send_email("ada@example.com")

        assert service.sent == ["ada@example.com"]
        assert "team@example.com" in caplog.text
        assert "ada@example.com" in caplog.text


class TestUserService:
    """Test cases for UserService."""

    @pytest.mark.asyncio
    async def test_create_user_saves_and_sends_email(self):
        """Test that creation stores the user and emails them."""
        repository = InMemoryUserRepository()
        mailer = LoggingEmailService(DemoSettings())
        service = UserService(repository, mailer)

        user = await service.create_user("Ada", "ada@example.com")

        assert user.name == "Ada"
        assert await service.get_users() == [user]
        assert mailer.sent == ["ada@example.com"]


class TestRequestContext:
    """Test cases for RequestContext."""

    def test_request_ids_are_unique(self):
        """Test that each context gets its own id."""
        assert RequestContext().request_id != RequestContext().request_id
