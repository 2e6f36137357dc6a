"""
pool-runner: fixed-size worker pool task execution.

A bounded number of worker threads consume a batch of named tasks. Each task
announces itself, pauses to simulate work, and announces completion.
"""

from pool_runner.errors import PoolError, PoolShutdownError
from pool_runner.orchestration.core.worker_pool import WorkerPool
from pool_runner.orchestration.core.context import WorkerContext
from pool_runner.schemas.pool import PoolState, Task, WaitResult

__version__ = "0.1.0"

__all__ = [
    "PoolError",
    "PoolShutdownError",
    "PoolState",
    "Task",
    "WaitResult",
    "WorkerContext",
    "WorkerPool",
]
