"""
Configuration management for the ticket verifier.
"""

from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_MESSAGE = "请添加 ticket 链接!"
DEFAULT_GITHUB_API_URL = "https://api.github.com"

# Environment variable backing each required setting, used in error messages
ENV_NAMES = {
    "base_url": "BASE_URL",
    "github_token": "GITHUB_TOKEN",
}


class Settings(BaseSettings):
    """Process-wide settings, read once from the environment."""
    base_url: str = Field(..., description="Tracker base URL that ticket links start with")
    api_url: Optional[str] = Field(
        None,
        description="Tracker API root; '/api' is appended to it"
    )
    api_key: Optional[str] = Field(None, description="Tracker API key sent as X-API-KEY")
    input_message: Optional[str] = Field(
        None,
        description="Failure comment from the action's 'message' input"
    )
    message: Optional[str] = Field(None, description="Failure comment from the environment")
    github_token: str = Field(..., description="GitHub token used to post comments")
    github_api_url: str = Field(
        DEFAULT_GITHUB_API_URL,
        description="GitHub REST API root"
    )

    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
    )

    @field_validator("base_url", "github_token")
    @classmethod
    def validate_required(cls, v: str) -> str:
        """Reject blank values for required settings."""
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @property
    def api_base(self) -> str:
        """Tracker API endpoint that ticket paths are appended to."""
        root = self.api_url or self.base_url
        return f"{root.rstrip('/')}/api"

    @property
    def failure_message(self) -> str:
        """Comment body posted on the pull request when verification fails."""
        return self.input_message or self.message or DEFAULT_MESSAGE


def load_settings(**overrides: Optional[str]) -> Settings:
    """
    Build settings from the environment, with explicit overrides taking priority.

    Args:
        **overrides: Setting values given on the command line; None values are ignored

    Returns:
        Frozen Settings instance

    Raises:
        ConfigurationError: If a required value is missing or blank
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "settings"
            if field in ENV_NAMES:
                problems.append(f"{ENV_NAMES[field]} environment variable is required")
            else:
                problems.append(f"{field.upper()}: {error['msg']}")
        raise ConfigurationError("; ".join(problems)) from e
