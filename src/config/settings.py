# src/config/settings.py
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.journal.settings import JournalSettings
from src.review.settings import ReviewerSettings


class SystemConfig(BaseModel):
    name: str = "Trade Journal"
    version: str = "1.0.0"
    log_level: str = "INFO"


class AnthropicConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ANTHROPIC_")

    api_key: str = ""


class Settings(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    journal: JournalSettings = Field(default_factory=JournalSettings)
    reviewer: ReviewerSettings = Field(default_factory=ReviewerSettings)
    anthropic: AnthropicConfig = Field(default_factory=AnthropicConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file with env var overrides."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        # Secrets come from the environment only
        data.pop("anthropic", None)
        anthropic = AnthropicConfig()

        return cls(**data, anthropic=anthropic)
