"""Configuration models and config file discovery."""

from .config import (
    CohereConfig,
    Config,
    MonitoringConfig,
    ScraperConfig,
    StorageConfig,
    SummarizerConfig,
    TranslatorConfig,
    find_config_file,
)

__all__ = [
    "Config",
    "CohereConfig",
    "MonitoringConfig",
    "ScraperConfig",
    "StorageConfig",
    "SummarizerConfig",
    "TranslatorConfig",
    "find_config_file",
]
