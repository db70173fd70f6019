"""
Configuration loader for the service fetch client
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "SERVICE_FETCH_CONFIG"

# env var -> FetchConfig field
ENV_OVERRIDES = {
    "SERVICE_FETCH_ERROR_MARKER_FIELD": "error_marker_field",
    "SERVICE_FETCH_DIAGNOSTIC_FIELD": "diagnostic_field",
    "SERVICE_FETCH_LOGGER_NAME": "logger_name",
    "SERVICE_FETCH_LOG_LEVEL": "log_level",
}

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class FetchConfig(BaseModel):
    """Fetch client configuration"""

    error_marker_field: str = Field(default="isBoom", min_length=1)
    diagnostic_field: str = Field(default="output", min_length=1)
    logger_name: str = Field(default="service_fetch.errors", min_length=1)
    log_level: str = "ERROR"
    default_headers: Dict[str, str] = Field(default_factory=lambda: {"Content-Type": "application/json"})

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_fetch_config(config_path: Optional[Union[str, Path]] = None) -> FetchConfig:
    """
    Load and validate fetch client configuration

    Args:
        config_path: YAML file to read. Falls back to $SERVICE_FETCH_CONFIG, then to defaults.

    Returns:
        Validated FetchConfig object

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None and os.getenv(CONFIG_PATH_ENV):
        config_path = os.environ[CONFIG_PATH_ENV]

    config_data: Dict[str, Any] = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
        if not isinstance(config_data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")

    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config_data[field_name] = value

    try:
        config = FetchConfig(**config_data)
        logger.debug("Loaded fetch config from %s", config_path or "defaults")
        return config
    except ValidationError as e:
        logger.error(f"Fetch config validation failed: {e}")
        raise
