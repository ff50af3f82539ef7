"""Stage 0: Admission"""

from .filter import AdmissionFilter

__all__ = ["AdmissionFilter"]
