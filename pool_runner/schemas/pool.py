"""
Pool schemas for pool-runner.

This module defines the task model submitted to a worker pool and the
enumerations describing pool lifecycle and simulated-work outcomes.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PoolState(str, Enum):
    """Lifecycle state of a worker pool."""
    ACCEPTING = "accepting"
    DRAINING = "draining"
    TERMINATED = "terminated"


class WaitResult(str, Enum):
    """Outcome of a simulated-work pause."""
    COMPLETED = "completed"
    INTERRUPTED = "interrupted"


class Task(BaseModel):
    """A labelled unit of work, executed exactly once by one worker."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    label: str = Field(..., description="Task label shown in the start line")
    duration_ms: int = Field(default=2000, description="Simulated work duration in milliseconds")
    work: Optional[Callable[..., Any]] = Field(
        default=None,
        description="Callable invoked as work(task, context); simulated work when unset",
    )

    @field_validator("label")
    @classmethod
    def validate_label(cls, v: str) -> str:
        """Validate the label is not blank."""
        if not v.strip():
            raise ValueError("Task label must not be empty")
        return v

    @field_validator("duration_ms")
    @classmethod
    def validate_duration(cls, v: int) -> int:
        """Validate duration is not negative."""
        if v < 0:
            raise ValueError(f"Duration must be non-negative, got {v}")
        return v


__all__ = ["PoolState", "WaitResult", "Task"]
