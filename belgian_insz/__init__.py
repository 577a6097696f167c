"""belgian-insz: decode and validate Belgian INSZ/NISS numbers (RN and BIS)."""
from .models import InszNumber, InszValidationResult, Sex, ValidationError
from .validator import InszValidator, validate

__version__ = "0.1.0"

__all__ = [
    "InszNumber",
    "InszValidationResult",
    "InszValidator",
    "Sex",
    "ValidationError",
    "validate",
]
