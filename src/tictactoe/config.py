"""Settings loaded from environment variables and an optional .env file."""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .engine import Player


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings.

    Every field can be set through a ``TICTACTOE_`` prefixed environment
    variable, e.g. ``TICTACTOE_PORT=9000``.
    """

    model_config = SettingsConfigDict(
        env_prefix="tictactoe_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    host: str = Field(default="127.0.0.1", description="Server host address")
    port: int = Field(default=8000, description="Server port")
    debug: bool = Field(default=False, description="Enable auto reload and debug logging")
    log_level: str = Field(default="INFO", description="Root logging level")
    max_games: int = Field(default=1000, ge=1, description="Most games kept at once")

    player_one_name: str = "Player 1"
    player_one_mark: str = "X"
    player_two_name: str = "Player 2"
    player_two_mark: str = "O"

    @field_validator(
        "player_one_name", "player_one_mark", "player_two_name", "player_two_mark", mode="before"
    )
    @classmethod
    def validate_and_strip(cls, value):
        if not isinstance(value, str):
            raise ValueError("must be a string")
        stripped = value.strip()
        if stripped == "":
            raise ValueError("must not be empty")
        return stripped

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def check_marks_differ(self):
        if self.player_one_mark == self.player_two_mark:
            raise ValueError("player marks must be different")
        return self

    def players(self):
        return (
            Player(self.player_one_name, self.player_one_mark),
            Player(self.player_two_name, self.player_two_mark),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
