"""User interface components"""

from .progress import ProgressTracker, ConsoleProgress, NullProgress

__all__ = [
    "ProgressTracker",
    "ConsoleProgress",
    "NullProgress",
]
