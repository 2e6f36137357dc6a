"""Per-worker execution context.

Each worker of a pool owns one context carrying its identifier, its interrupt
signal and the output sink shared by every worker of the pool.
"""

import sys
import threading
from typing import Optional, TextIO

from pool_runner.schemas.pool import WaitResult


class WorkerContext:
    """Execution context owned by a single worker."""

    def __init__(
        self,
        worker_name: str,
        output: Optional[TextIO] = None,
        output_lock: Optional[threading.Lock] = None,
    ):
        """Initialize the context.

        Args:
            worker_name: Stable identifier of the owning worker
            output: Stream receiving task output lines (defaults to stdout)
            output_lock: Lock shared by all contexts writing to ``output``
        """
        self.worker_name = worker_name
        self._output = output
        self._output_lock = output_lock or threading.Lock()
        self._interrupt = threading.Event()

    @property
    def output(self) -> TextIO:
        # Resolved late so redirected stdout is honoured
        return self._output if self._output is not None else sys.stdout

    def emit(self, line: str) -> None:
        """Write a single line to the output sink."""
        with self._output_lock:
            stream = self.output
            stream.write(f"{line}\n")
            stream.flush()

    def pause(self, duration_ms: int) -> WaitResult:
        """Block for ``duration_ms`` unless the worker is interrupted first.

        Args:
            duration_ms: Pause length in milliseconds

        Returns:
            WaitResult.INTERRUPTED if the interrupt signal arrived during the
            pause, WaitResult.COMPLETED otherwise
        """
        if self._interrupt.wait(timeout=duration_ms / 1000.0):
            self._interrupt.clear()
            return WaitResult.INTERRUPTED
        return WaitResult.COMPLETED

    def interrupt(self) -> None:
        """Deliver the cancellation signal to this worker."""
        self._interrupt.set()

    def reset_interrupt(self) -> None:
        self._interrupt.clear()

    def __repr__(self) -> str:
        return f"WorkerContext(worker_name={self.worker_name!r})"


__all__ = ["WorkerContext"]
