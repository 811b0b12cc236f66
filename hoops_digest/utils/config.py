"""Configuration management using environment variables."""

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from hoops_digest.models.config import (
    DEFAULT_LOGO_URL_TEMPLATE,
    DEFAULT_MARQUEE_FRANCHISES,
    DEFAULT_MARQUEE_MATCHUPS,
    TransformConfig,
)

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or console)")
    log_dir: str = Field(default="logs", description="Directory for log files")

    # Response cache
    cache_enabled: bool = Field(default=True, description="Enable response caching")
    cache_ttl_live_seconds: int = Field(
        default=10, ge=0, description="TTL for game responses that are not final"
    )
    cache_ttl_final_seconds: int = Field(
        default=300, ge=0, description="TTL for final game responses"
    )
    summary_cache_ttl_seconds: int = Field(
        default=7 * 24 * 60 * 60, ge=0, description="TTL for generated game summaries"
    )

    # Editorial configuration
    marquee_franchises: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_MARQUEE_FRANCHISES),
        description="Abbreviations whose games are always marquee",
    )
    marquee_matchups: list[tuple[str, str]] = Field(
        default_factory=lambda: list(DEFAULT_MARQUEE_MATCHUPS),
        description="Unordered abbreviation pairs considered marquee matchups",
    )
    logo_url_template: str = Field(
        default=DEFAULT_LOGO_URL_TEMPLATE,
        description="Fallback logo URL, formatted with the lower-cased abbreviation",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid option."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is a valid option."""
        if v not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return v

    @field_validator("marquee_franchises")
    @classmethod
    def validate_marquee_franchises(cls, v: list[str]) -> list[str]:
        return [abbr.strip().upper() for abbr in v if abbr and abbr.strip()]

    @field_validator("marquee_matchups")
    @classmethod
    def validate_marquee_matchups(cls, v: list[tuple[str, str]]) -> list[tuple[str, str]]:
        pairs = []
        for first, second in v:
            first, second = first.strip().upper(), second.strip().upper()
            if not first or not second or first == second:
                raise ValueError(f"marquee matchup must name two teams, got ({first!r}, {second!r})")
            pairs.append((first, second))
        return pairs

    @field_validator("logo_url_template")
    @classmethod
    def validate_logo_url_template(cls, v: str) -> str:
        if "{abbreviation}" not in v:
            raise ValueError("logo_url_template must contain '{abbreviation}'")
        return v

    def transform_config(self) -> TransformConfig:
        """Build the value object handed to the transformation pipeline."""
        return TransformConfig(
            marquee_franchises=frozenset(self.marquee_franchises),
            marquee_matchups=frozenset(frozenset(pair) for pair in self.marquee_matchups),
            logo_url_template=self.logo_url_template,
        )

    class Config:
        """Pydantic configuration."""

        env_prefix = ""
        case_sensitive = False
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings.
    """
    return Settings()


def ensure_directories() -> None:
    """Ensure the log directory exists."""
    settings = get_settings()
    Path(settings.log_dir).mkdir(parents=True, exist_ok=True)
