"""Stage 3: Type Inference"""

from .engine import TypeInferenceEngine

__all__ = ["TypeInferenceEngine"]
