"""Pipeline stages"""

from .s0_admission import AdmissionFilter
from .s1_reception import Receiver
from .s2_unification import SchemaUnifier
from .s3_inference import TypeInferenceEngine

__all__ = [
    "AdmissionFilter",
    "Receiver",
    "SchemaUnifier",
    "TypeInferenceEngine",
]
