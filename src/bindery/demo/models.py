import secrets
import string

from pydantic import BaseModel, ConfigDict, Field

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 6


def new_user_id() -> str:
    """Random 6-character base36 identifier."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


class UserCreate(BaseModel):
    """Payload for creating a user. Blank fields are rejected."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_user_id)
    name: str
    email: str
