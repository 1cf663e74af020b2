"""
Configuration management for blogsum using Pydantic.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# --- Nested Configuration Models ---


class ScraperConfig(BaseModel):
    """Document fetch and extraction configuration."""

    timeout: float = Field(default=15.0, gt=0, description="HTTP request timeout in seconds.")
    max_retries: int = Field(default=3, ge=1, description="Maximum scrape attempts per URL.")
    retry_base_delay: float = Field(
        default=1.0, ge=0, description="Base delay in seconds; attempt N waits N * base delay."
    )
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent string for HTTP requests.")
    validate_content: bool = Field(default=True, description="Reject extractions below min_quality_score.")
    min_content_length: int = Field(default=100, ge=0, description="Minimum character count for good content.")
    min_quality_score: float = Field(
        default=0.3, ge=0, le=1, description="Extractions scoring below this trigger a retry."
    )


class SummarizerConfig(BaseModel):
    """Summarization configuration."""

    use_hosted: bool = Field(default=True, description="Try the hosted model before the extractive fallback.")
    combined: bool = Field(
        default=False, description="Summarize and translate with a single hosted call when available."
    )


class TranslatorConfig(BaseModel):
    """Urdu translation configuration."""

    use_hosted: bool = Field(default=True, description="Try the hosted model before the dictionary fallback.")
    max_retries: int = Field(default=3, ge=1, description="Hosted translation attempts before falling back.")
    retry_base_delay: float = Field(default=1.0, ge=0, description="Linear backoff base delay in seconds.")
    min_quality_score: float = Field(default=0.5, ge=0, le=1, description="Minimum Urdu quality score.")


class CohereConfig(BaseModel):
    """Hosted language model configuration."""

    api_key: str | None = Field(
        default_factory=lambda: os.getenv("COHERE_API_KEY") or None,
        description="Cohere API key. Hosted calls are disabled without it.",
    )
    base_url: str = Field(default="https://api.cohere.com", description="Cohere API base URL.")
    model: str = Field(default="command-r-plus", description="Chat model name.")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds.")


class StorageConfig(BaseModel):
    """Configuration for the SQLite article store."""

    enabled: bool = Field(default=True, description="Persist pipeline results.")
    db_path: Path = Field(default=Path("./data/blogsum.db"), description="SQLite database file path")

    @field_validator("db_path", mode="before")
    @classmethod
    def ensure_db_directory(cls, v: Any) -> Path:
        """Ensure database directory exists."""
        path = Path(v) if not isinstance(v, Path) else v
        path.parent.mkdir(parents=True, exist_ok=True)
        return path


class MonitoringConfig(BaseModel):
    """Configuration for logging."""

    log_level: str = Field(default="INFO", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to console.")

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "blogsum"
    version: str = "0.1.0"
    scraper: ScraperConfig = Field(default_factory=ScraperConfig)
    summarizer: SummarizerConfig = Field(default_factory=SummarizerConfig)
    translator: TranslatorConfig = Field(default_factory=TranslatorConfig)
    cohere: CohereConfig = Field(default_factory=CohereConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="BLOGSUM_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for path in (current_dir / "config.yaml", current_dir / "config.yml"):
        if path.exists():
            return path
    return None

