"""Configuration module for voicegame."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseSettings):
    """Runtime configuration for the game tool and its logging."""

    log_level: str = "INFO"
    tool_name: str = "makeMove"
    tool_response_format: Literal["board", "json"] = "board"

    model_config = SettingsConfigDict(env_prefix="VOICEGAME_")


settings = GameSettings()

__all__ = [
    "GameSettings",
    "settings",
]
