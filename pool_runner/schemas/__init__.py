"""Schemas for tasks and pool states."""

from pool_runner.schemas.pool import PoolState, Task, WaitResult

__all__ = ["PoolState", "Task", "WaitResult"]
