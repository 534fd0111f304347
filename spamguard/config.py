from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REMOTE_BLOCKLIST_URL = (
    "https://raw.githubusercontent.com/disposable-email-domains/"
    "disposable-email-domains/master/disposable_email_blocklist.conf"
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    debug: bool = Field(default=False)
    cors_allowed_origins: list[str] = Field(default=["*"])
    log_json: bool = Field(default=False)  # serialized loguru records outside debug

    # Remote disposable-domain blocklist
    remote_blocklist_enabled: bool = Field(default=True)
    remote_blocklist_url: str = Field(default=DEFAULT_REMOTE_BLOCKLIST_URL)
    remote_blocklist_timeout: float = Field(default=5.0)
    remote_blocklist_cache_ttl_seconds: int = Field(default=0)  # 0 disables caching


class HeuristicsConfig:
    """Lexical heuristic thresholds from config.yml."""

    def __init__(self, data: dict[str, Any]) -> None:
        entropy = data.get("entropy", {})
        self.entropy_min_length: int = entropy.get("min_length", 5)
        self.high_entropy_threshold: float = entropy.get("high_threshold", 3.8)
        self.high_entropy_points: int = entropy.get("high_points", 60)
        self.moderate_entropy_threshold: float = entropy.get("moderate_threshold", 2.8)
        self.moderate_entropy_points: int = entropy.get("moderate_points", 10)

        digits = data.get("digits", {})
        self.digit_ratio_threshold: float = digits.get("ratio_threshold", 0.3)
        self.digit_ratio_points: int = digits.get("points", 30)

        vowels = data.get("vowels", {})
        self.vowel_min_length: int = vowels.get("min_length", 5)
        self.vowel_ratio_threshold: float = vowels.get("ratio_threshold", 0.1)
        self.vowel_ratio_points: int = vowels.get("points", 40)

        actions = data.get("actions", {})
        self.block_threshold: int = actions.get("block_threshold", 70)
        self.flag_threshold: int = actions.get("flag_threshold", 40)


class AppConfig:
    """Combined application configuration from .env and config.yml."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.settings = Settings()
        self._load_yaml(config_path or Path("config.yml"))

    def _load_yaml(self, config_path: Path) -> None:
        if config_path.exists():
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        else:
            data = {}

        self.heuristics = HeuristicsConfig(data.get("heuristics", {}))


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_config() -> AppConfig:
    """Get cached full config instance."""
    return AppConfig()
