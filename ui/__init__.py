"""User interface components"""

from .progress import ProgressTracker, ConsoleProgress, CallbackProgress

__all__ = [
    "ProgressTracker",
    "ConsoleProgress",
    "CallbackProgress",
]
