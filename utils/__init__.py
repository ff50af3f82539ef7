"""Utility modules"""

from .encoding import decode_text

__all__ = ["decode_text"]
