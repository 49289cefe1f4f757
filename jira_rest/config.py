"""Configuration for the Jira REST client."""

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Jira REST API root, e.g. https://yourco.atlassian.net/rest/api/2/
    base_url: str = ""
    user: str = ""
    password: str = ""

    # Seconds allowed for establishing the TCP/TLS connection only
    dial_timeout: float = 10.0

    model_config = {"env_prefix": "JIRA_"}

    @field_validator("dial_timeout", mode="before")
    @classmethod
    def _parse_dial_timeout(cls, value: object) -> object:
        if value in (None, ""):
            return 10.0
        return value

    @field_validator("dial_timeout")
    @classmethod
    def _check_dial_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("dial_timeout must be a positive number of seconds")
        return value


settings = Settings()
