"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from feedview.config.models import FeedviewConfig


def load_config(path: Path | str) -> FeedviewConfig:
    """Load viewer configuration from a YAML file.

    An empty file yields the default configuration (local
    ``data/articles.json``, batches of 20).

    Args:
        path: Path to YAML config file.

    Returns:
        Validated FeedviewConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If a section is invalid or ``source.type``
            is not ``http`` or ``file``.
    """
    with Path(path).open(encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    return FeedviewConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Path to ``configs/default.yaml`` at the repository root."""
    return Path(__file__).resolve().parents[3] / "configs" / "default.yaml"
