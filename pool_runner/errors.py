"""Exceptions raised by the worker pool."""


class PoolError(Exception):
    """Base class for worker pool errors."""


class PoolShutdownError(PoolError):
    """Raised when a task is submitted after shutdown was requested."""

    def __init__(self, pool_name: str, label: str):
        self.pool_name = pool_name
        self.label = label
        super().__init__(f"Pool '{pool_name}' is shut down; rejected task '{label}'")


__all__ = ["PoolError", "PoolShutdownError"]
