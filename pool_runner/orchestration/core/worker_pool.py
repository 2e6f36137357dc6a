"""Worker pool for fixed-capacity task execution.

This module wraps a thread pool executor with per-worker execution contexts,
lifecycle tracking, interruption and metrics.
"""

import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, List, Optional, TextIO

from pool_runner.errors import PoolError, PoolShutdownError
from pool_runner.orchestration.core.context import WorkerContext
from pool_runner.orchestration.core.tasks import run_task
from pool_runner.schemas.pool import PoolState, Task, WaitResult

logger = logging.getLogger(__name__)


class WorkerPool:
    """Manages a fixed-size pool of worker threads for task execution."""

    def __init__(self, name: str = "pool-1", max_workers: int = 5,
                 output: Optional[TextIO] = None):
        """Initialize worker pool.

        Args:
            name: Pool identifier name, used as the worker name prefix
            max_workers: Maximum number of concurrent workers, at least 1
            output: Stream receiving task output lines (defaults to stdout)

        Raises:
            ValueError: If max_workers is less than 1
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")

        self.name = name
        self.max_workers = max_workers

        self._output = output
        self._output_lock = threading.Lock()
        self._worker_names = [f"{name}-thread-{i + 1}" for i in range(max_workers)]
        self._contexts: Dict[str, WorkerContext] = {}
        self._local = threading.local()

        self._state = PoolState.ACCEPTING
        self._terminated = threading.Event()
        self._pending = 0

        # Monitoring attributes
        self.submitted_tasks = 0
        self.active_tasks = 0
        self.peak_active_tasks = 0
        self.completed_tasks = 0
        self.failed_tasks = 0
        self.interrupted_tasks = 0
        self.start_time = time.time()

        # Lock for thread-safe updates
        self._lock = threading.Lock()

        self.executor = ThreadPoolExecutor(max_workers=max_workers,
                                           thread_name_prefix=f"{name}-thread",
                                           initializer=self._init_worker)
        logger.info(f"Created worker pool '{name}' with {max_workers} workers")

    @property
    def state(self) -> PoolState:
        with self._lock:
            return self._state

    @property
    def worker_names(self) -> List[str]:
        return list(self._worker_names)

    def submit(self, task: Task) -> None:
        """Queue ``task`` for execution.

        Args:
            task: Task to run on the next idle worker

        Raises:
            PoolShutdownError: If shutdown has already been requested
        """
        with self._lock:
            if self._state is not PoolState.ACCEPTING:
                logger.warning(f"Rejected task '{task.label}': pool '{self.name}' is {self._state.value}")
                raise PoolShutdownError(self.name, task.label)
            try:
                future = self.executor.submit(self._execute, task)
            except RuntimeError as e:
                # Executor refuses work once the interpreter is shutting down
                raise PoolShutdownError(self.name, task.label) from e
            self._pending += 1
            self.submitted_tasks += 1
        future.add_done_callback(self._on_task_done)
        logger.debug(f"Submitted task '{task.label}' to pool '{self.name}'")

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting tasks; already accepted tasks still run.

        Calling this more than once has no further effect. From inside a task
        the call never waits, since a worker cannot wait for itself.

        Args:
            wait: Block until every accepted task has finished
        """
        with self._lock:
            if self._state is PoolState.ACCEPTING:
                self._state = PoolState.DRAINING
                logger.info(f"Pool '{self.name}' shutting down after {self.submitted_tasks} submitted tasks")
                self.executor.shutdown(wait=False)
                self._maybe_terminate()
        if wait:
            self.join()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for every accepted task to finish.

        Args:
            timeout: Maximum seconds to wait, or None to wait indefinitely

        Returns:
            True if the pool reached the terminated state

        Raises:
            PoolError: If called without a timeout before shutdown, which
                would never return
        """
        if self._in_worker():
            logger.debug(f"join() called from a worker of pool '{self.name}'; not waiting")
            return self._terminated.is_set()

        if timeout is None and self.state is PoolState.ACCEPTING:
            raise PoolError(f"Pool '{self.name}' is still accepting tasks; call shutdown() first")

        if not self._terminated.wait(timeout):
            return False
        if timeout is None:
            # Reap the worker threads as well
            self.executor.shutdown(wait=True)
        return True

    def interrupt(self, worker_name: str) -> None:
        """Interrupt the simulated-work pause of one worker.

        Args:
            worker_name: Name of the worker to interrupt

        Raises:
            ValueError: If no worker has that name
        """
        if worker_name not in self._worker_names:
            raise ValueError(f"Unknown worker '{worker_name}' in pool '{self.name}'")
        with self._lock:
            context = self._contexts.get(worker_name)
        if context is None:
            logger.debug(f"Worker {worker_name} has not started; nothing to interrupt")
            return
        logger.debug(f"Interrupting worker {worker_name}")
        context.interrupt()

    def get_metrics(self) -> Dict[str, Any]:
        """Get current worker pool metrics."""
        with self._lock:
            return {
                "name": self.name,
                "max_workers": self.max_workers,
                "state": self._state.value,
                "submitted_tasks": self.submitted_tasks,
                "active_tasks": self.active_tasks,
                "peak_active_tasks": self.peak_active_tasks,
                "completed_tasks": self.completed_tasks,
                "failed_tasks": self.failed_tasks,
                "interrupted_tasks": self.interrupted_tasks,
                "uptime_seconds": time.time() - self.start_time
            }

    def _init_worker(self) -> None:
        # Executor threads start lazily, one per slot up to max_workers
        with self._lock:
            worker_name = self._worker_names[len(self._contexts)]
            context = WorkerContext(worker_name, output=self._output, output_lock=self._output_lock)
            self._contexts[worker_name] = context
        threading.current_thread().name = worker_name
        self._local.context = context
        logger.debug(f"Started worker {worker_name}")

    def _in_worker(self) -> bool:
        return getattr(self._local, "context", None) is not None

    def _execute(self, task: Task) -> None:
        context: WorkerContext = self._local.context
        # Drop interrupts aimed at a previous task
        context.reset_interrupt()
        with self._lock:
            self.active_tasks += 1
            self.peak_active_tasks = max(self.peak_active_tasks, self.active_tasks)

        logger.debug(f"{context.worker_name} running task '{task.label}'")
        try:
            result = run_task(task, context)
        except BaseException:
            # SystemExit and friends fail the task, not the worker
            logger.exception(f"{context.worker_name}: task '{task.label}' failed")
            with self._lock:
                self.failed_tasks += 1
        else:
            with self._lock:
                self.completed_tasks += 1
                if result is WaitResult.INTERRUPTED:
                    self.interrupted_tasks += 1
        finally:
            with self._lock:
                self.active_tasks -= 1

    def _on_task_done(self, future: "Future[None]") -> None:
        with self._lock:
            self._pending -= 1
            self._maybe_terminate()

    def _maybe_terminate(self) -> None:
        # Caller holds self._lock
        if self._state is PoolState.DRAINING and self._pending == 0:
            self._state = PoolState.TERMINATED
            self._terminated.set()
            logger.info(
                f"Pool '{self.name}' terminated: {self.completed_tasks} completed, "
                f"{self.failed_tasks} failed"
            )

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown(wait=True)

    def __repr__(self) -> str:
        return f"WorkerPool(name={self.name!r}, max_workers={self.max_workers}, state={self.state.value!r})"


# Export the class
__all__ = ["WorkerPool"]
