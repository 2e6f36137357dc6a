"""Simulated work executed by demo tasks.

Each task announces its start with the executing worker and its label, pauses
for the task duration, and announces completion. An interrupted pause is
reported and the task still counts as finished.
"""

import logging
from typing import Any, List

from pool_runner.orchestration.core.context import WorkerContext
from pool_runner.schemas.pool import Task, WaitResult

logger = logging.getLogger(__name__)


def simulate_work(task: Task, context: WorkerContext) -> WaitResult:
    """Run the start / pause / end routine for ``task``.

    Args:
        task: Task being executed
        context: Context of the executing worker

    Returns:
        Result of the pause
    """
    context.emit(f"{context.worker_name} Start. Task = {task.label}")
    result = context.pause(task.duration_ms)
    if result is WaitResult.INTERRUPTED:
        logger.warning(
            f"{context.worker_name}: wait interrupted while running '{task.label}'",
            stack_info=True,
        )
    context.emit(f"{context.worker_name} End.")
    return result


def run_task(task: Task, context: WorkerContext) -> Any:
    """Execute ``task`` in ``context``, falling back to simulated work."""
    work = task.work if task.work is not None else simulate_work
    return work(task, context)


def make_tasks(count: int, duration_ms: int = 2000) -> List[Task]:
    """Build ``count`` tasks labelled "Task 0".."Task <count-1>"."""
    if count < 0:
        raise ValueError(f"Task count must be non-negative, got {count}")
    return [Task(label=f"Task {i}", duration_ms=duration_ms) for i in range(count)]


__all__ = ["simulate_work", "run_task", "make_tasks"]
