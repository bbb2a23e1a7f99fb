"""Minimal engine core: a subsystem loop with frame pacing, worker threads and logging."""

__version__ = "1.0.0"