"""Command-line entry points for pool-runner."""
