from .evaluator_service import (
    RawInput,
    ValidationError,
    ValidationResult,
    CalculationResult,
    InvalidMeasurements,
    validate,
    evaluate,
)

from .interpretation_service import interpret, format_interpretation

__all__ = [
    # Measurement evaluator
    "RawInput",
    "ValidationError",
    "ValidationResult",
    "CalculationResult",
    "InvalidMeasurements",
    "validate",
    "evaluate",
    # Interpretation
    "interpret",
    "format_interpretation",
]
