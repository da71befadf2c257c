"""Runnable examples of classic object-oriented design patterns."""

__version__ = "0.1.0"

__all__ = [
    "adapter",
    "builder",
    "factory",
    "proxy",
    "singleton",
    "observer",
    "weather",
    "producer_consumer",
]