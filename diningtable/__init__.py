"""Dining philosophers simulation: settings, a clock, two tables and a command line."""

__version__ = "0.1.0"
__all__ = ["config", "clock", "table", "semaphore_table", "cli"]