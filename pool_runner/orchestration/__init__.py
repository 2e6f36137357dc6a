"""Orchestration components for running tasks on a worker pool."""
