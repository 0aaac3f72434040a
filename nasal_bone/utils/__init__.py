from .ob_calculators import (
    PERCENTILE_BANDS,
    PERCENTILE_TABLE,
    UnknownGestationalWeek,
    classify_nasal_bone_percentile,
    compute_ratios,
)

from .i18n import get_translation, normalize_language

__all__ = [
    # OB calculators
    "PERCENTILE_BANDS",
    "PERCENTILE_TABLE",
    "UnknownGestationalWeek",
    "classify_nasal_bone_percentile",
    "compute_ratios",
    # i18n
    "get_translation",
    "normalize_language",
]
