"""
Pool configuration module.

This module provides the configuration model for the worker pool driver.
It loads and validates the YAML configuration file using Pydantic.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "pool_config.yaml"


class PoolConfig(BaseModel):
    """Configuration for the worker pool driver."""

    name: str = Field(default="pool-1", description="Pool name, prefix of worker names")
    capacity: int = Field(default=5, description="Number of concurrent workers")
    task_count: int = Field(default=10, description="Number of tasks the driver submits")
    work_duration_ms: int = Field(default=2000, description="Simulated work per task in milliseconds")
    log_level: str = Field(default="INFO", description="Logging level for the driver")

    @field_validator("capacity")
    @classmethod
    def validate_capacity(cls, v: int) -> int:
        """Validate capacity is positive."""
        if v < 1:
            raise ValueError(f"Capacity must be at least 1, got {v}")
        return v

    @field_validator("task_count", "work_duration_ms")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate value is not negative."""
        if v < 0:
            raise ValueError(f"Value must be non-negative, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {v}")
        return level


def get_pool_config(config_path: Optional[Union[str, Path]] = None) -> PoolConfig:
    """
    Load and validate the pool configuration.

    Args:
        config_path: Path to the configuration file. If None, uses the default path.

    Returns:
        Validated pool configuration.

    Raises:
        FileNotFoundError: If the configuration file does not exist
        pydantic.ValidationError: If a value is invalid
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    config_path = Path(os.fspath(config_path))
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r") as f:
        config_dict = yaml.safe_load(f)

    logger.debug(f"Loaded pool configuration from {config_path}")
    return PoolConfig.model_validate(config_dict or {})


__all__ = ["PoolConfig", "get_pool_config", "DEFAULT_CONFIG_PATH"]
