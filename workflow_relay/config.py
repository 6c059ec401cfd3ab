"""
Application configuration using pydantic-settings.
"""
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Deployment settings, built once at startup and never mutated."""

    # Application
    app_name: str = "Workflow Relay"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Target file
    github_owner: str
    github_repo: str
    file_path: str
    branch: str

    # Credentials
    gh_token: SecretStr
    webhook_secret: SecretStr

    # GitHub API
    github_api_url: str = "https://api.github.com"
    user_agent: str = "workflow-relay"
    commit_message: str = "auto update images.txt"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )
