"""Configuration module for feedview."""

from feedview.config.factory import create_debouncer, create_loader, create_session
from feedview.config.loader import get_default_config_path, load_config
from feedview.config.models import (
    DisplayConfig,
    FeedviewConfig,
    FileSourceConfig,
    HttpSourceConfig,
    LoggingConfig,
    RevealConfig,
    SearchConfig,
    SourceConfig,
)

__all__ = [
    "DisplayConfig",
    "FeedviewConfig",
    "FileSourceConfig",
    "HttpSourceConfig",
    "LoggingConfig",
    "RevealConfig",
    "SearchConfig",
    "SourceConfig",
    "create_debouncer",
    "create_loader",
    "create_session",
    "get_default_config_path",
    "load_config",
]
