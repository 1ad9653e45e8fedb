from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DemoSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BINDERY_", env_file=".env", case_sensitive=False, extra="ignore")

    app_title: str = Field(default="bindery user service demo")
    log_level: str = Field(default="INFO")
    sender_address: str = Field(default="noreply@bindery.local", min_length=3)


@lru_cache(maxsize=1)
def get_settings() -> DemoSettings:
    return DemoSettings()
