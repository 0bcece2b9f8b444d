"""Configuration management for the textformats CLI."""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from textformats import FormatterSettings

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TEXTFORMATS_CONFIG"


class CliConfig(BaseModel):
    """textformats CLI configuration."""

    model_config = ConfigDict(extra="ignore")

    verbose: bool = Field(default=False, description="Verbose output by default")
    formatter: FormatterSettings = Field(
        default_factory=FormatterSettings, description="Converter settings"
    )


def get_config_path() -> Path:
    """Get the path to the config file.

    Returns:
        $TEXTFORMATS_CONFIG if set, otherwise ~/.textformats/config.yaml
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".textformats" / "config.yaml"


def load_config() -> CliConfig:
    """Load configuration from file.

    Returns:
        CliConfig with loaded values, or defaults if the file is missing or
        malformed
    """
    config_path = get_config_path()

    if not config_path.exists():
        return CliConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        return CliConfig(**data)
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        logger.warning(f"Ignoring malformed config file {config_path}: {e}")
        return CliConfig()


def save_config(config: CliConfig):
    """Save configuration to file.

    Args:
        config: CliConfig instance to save
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(exclude_none=True), f, default_flow_style=False)
