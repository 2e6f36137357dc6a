"""Core components for worker pool execution.

This module provides the worker pool, the per-worker execution context and
the simulated work routine executed by the demo tasks.
"""

from pool_runner.orchestration.core.context import WorkerContext
from pool_runner.orchestration.core.tasks import make_tasks, run_task, simulate_work
from pool_runner.orchestration.core.worker_pool import WorkerPool

__all__ = ["WorkerContext", "WorkerPool", "make_tasks", "run_task", "simulate_work"]
