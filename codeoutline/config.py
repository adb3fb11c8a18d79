"""Configuration loading for codeoutline."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .analyzers.base import ConfigError

DEFAULT_SKIP_DIRS = [
    ".git",
    "node_modules",
    "__pycache__",
    ".venv",
    "venv",
    "dist",
    "build",
]


class OutlineConfig(BaseModel):
    """Settings for repository outlining and output."""
    include_extensions: list[str] | None = Field(
        None, description="Only outline files with these extensions"
    )
    skip_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_SKIP_DIRS))
    max_file_size: int = Field(1_048_576, ge=1, description="Skip files larger than this (bytes)")
    workers: int = Field(1, ge=1, description="Files outlined concurrently")
    output_format: Literal["plain", "markdown", "json"] = "markdown"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


def load_config(config_path: Path | str | None = None) -> OutlineConfig:
    """Load configuration from a YAML file, or defaults when no path is given."""
    if config_path is None:
        return OutlineConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    try:
        return OutlineConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
