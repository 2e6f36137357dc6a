"""Configuration models and loaders for pool-runner."""

from pool_runner.config.pool_config import PoolConfig, get_pool_config

__all__ = ["PoolConfig", "get_pool_config"]
