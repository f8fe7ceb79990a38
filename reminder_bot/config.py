"""Configuration for the team reminder bot."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # App
    environment: str = Field(default="development", description="development = dry run")
    debug: bool = Field(default=True)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    # Google Chat delivery
    google_space_webhook_url: Optional[str] = Field(default=None)

    # GitHub
    github_token: Optional[str] = Field(default=None)
    github_repos: str = Field(default="", description="Comma-separated owner/name list")

    # PR reminder
    max_pr_age_days: int = Field(default=120)
    pr_fetch_limit: int = Field(default=100)
    report_hidden_only: bool = Field(default=False)

    # Schedule (crontab strings are evaluated in UTC)
    timezone_offset_hours: int = Field(default=7)
    standup_time_label: str = Field(default="10:00 AM (UTC+7)")
    standup_cron: str = Field(default="0 3 * * *")
    pr_reminder_cron: str = Field(default="0 1 * * *")
    enable_scheduler: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_dry_run(self) -> bool:
        """Messages are only logged, never delivered, in development."""
        return self.environment == "development"


settings = Settings()
