"""Pydantic configuration models for feedview."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

# ============================================================
# Source Configs
# ============================================================


class HttpSourceConfig(BaseModel):
    """Configuration for HttpArticleLoader."""

    type: Literal["http"] = "http"
    url: str
    timeout: float = 30.0

    model_config = {"frozen": True}


class FileSourceConfig(BaseModel):
    """Configuration for FileArticleLoader."""

    type: Literal["file"] = "file"
    path: str = "data/articles.json"

    model_config = {"frozen": True}


SourceConfig = Annotated[
    HttpSourceConfig | FileSourceConfig,
    Field(discriminator="type"),
]


# ============================================================
# Presentation Configs
# ============================================================


class RevealConfig(BaseModel):
    """Batching of the incremental article list."""

    batch_size: int = Field(default=20, ge=1)
    stagger_ms: int = Field(default=50, ge=0)

    model_config = {"frozen": True}


class SearchConfig(BaseModel):
    """Live title search settings."""

    debounce_ms: int = Field(default=300, ge=0)

    model_config = {"frozen": True}


class DisplayConfig(BaseModel):
    """Date and label rendering settings."""

    timezone: str = "Asia/Tokyo"
    source_label_max: int = Field(default=12, ge=1)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class FeedviewConfig(BaseModel):
    """Root configuration for feedview."""

    source: HttpSourceConfig | FileSourceConfig = Field(
        default_factory=FileSourceConfig, discriminator="type"
    )
    reveal: RevealConfig = Field(default_factory=RevealConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
