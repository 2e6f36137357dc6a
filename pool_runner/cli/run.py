"""
Worker pool demo driver.

Creates a pool, submits a fixed batch of named tasks in order and requests
shutdown straight away. The executor's threads are joined at interpreter
exit, so the process keeps running until every accepted task has finished.
"""

import logging
import sys
from typing import Optional, TextIO

from pool_runner.config.pool_config import PoolConfig, get_pool_config
from pool_runner.orchestration.core.tasks import make_tasks
from pool_runner.orchestration.core.worker_pool import WorkerPool

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr, keeping stdout for task output."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def run_demo(config: Optional[PoolConfig] = None, output: Optional[TextIO] = None) -> WorkerPool:
    """
    Submit the demo batch to a new pool and request shutdown.

    Args:
        config: Pool configuration (packaged defaults if None)
        output: Stream receiving task output lines (defaults to stdout)

    Returns:
        The pool, already draining
    """
    config = config or get_pool_config()

    pool = WorkerPool(name=config.name, max_workers=config.capacity, output=output)
    for task in make_tasks(config.task_count, duration_ms=config.work_duration_ms):
        pool.submit(task)
    pool.shutdown(wait=False)

    logger.info(f"Submitted {config.task_count} tasks to {config.capacity} workers")
    return pool


def main() -> int:
    """Run the worker pool demo."""
    config = get_pool_config()
    configure_logging(config.log_level)
    run_demo(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
