"""Stage 1: Reception"""

from .receiver import Receiver

__all__ = ["Receiver"]
