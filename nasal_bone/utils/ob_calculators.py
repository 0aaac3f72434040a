"""
OB Calculation Utilities
Nasal bone percentile (weeks 20-23) and nasal bone ratios (LPN/LHN, DBP/LHN)
"""
from types import MappingProxyType
import logging

logger = logging.getLogger(__name__)

# Band labels, in the same order as the thresholds of each table row
PERCENTILE_BANDS = (1, 5, 50, 95, 99)

# Upper bound of each band (mm) per gestational week
PERCENTILE_TABLE = MappingProxyType({
    20: (2.84, 3.65, 5.60, 7.57, 8.38),
    21: (3.02, 3.86, 5.88, 7.92, 8.75),
    22: (3.21, 4.07, 6.15, 8.26, 9.12),
    23: (3.39, 4.28, 6.43, 8.60, 9.49),
})

MIN_TABLE_WEEK = min(PERCENTILE_TABLE)
MAX_TABLE_WEEK = max(PERCENTILE_TABLE)


class UnknownGestationalWeek(KeyError):
    """Raised when a week has no row in the percentile table."""

    def __init__(self, week):
        super().__init__(week)
        self.week = week

    def __str__(self):
        return (f"No nasal bone reference for week {self.week} "
                f"(table covers {MIN_TABLE_WEEK}-{MAX_TABLE_WEEK})")


def classify_nasal_bone_percentile(ga_weeks, lhn_mm):
    """
    Get the nasal bone length (LHN) percentile band for a gestational week

    Step function over the week's thresholds: the first threshold that is
    >= lhn_mm gives the band, so a value equal to a threshold stays in the
    lower band. Anything above the last threshold is band 99.
    Days are not part of the lookup; only whole weeks select a row.

    Args:
        ga_weeks: Gestational age in whole weeks (20-23)
        lhn_mm: Nasal bone length in millimeters

    Returns:
        int: One of 1, 5, 50, 95, 99
    """
    try:
        thresholds = PERCENTILE_TABLE[ga_weeks]
    except KeyError:
        raise UnknownGestationalWeek(ga_weeks) from None

    for band, threshold in zip(PERCENTILE_BANDS, thresholds):
        if lhn_mm <= threshold:
            return band
    return PERCENTILE_BANDS[-1]


def compute_ratios(lhn_mm, lpn_mm, dbp_mm):
    """
    Calculate prenasal/nasal bone and biparietal/nasal bone ratios

    No rounding is applied. Caller guarantees lhn_mm > 0.

    Args:
        lhn_mm: Nasal bone length (mm)
        lpn_mm: Prenasal length (mm)
        dbp_mm: Biparietal diameter (mm)

    Returns:
        tuple: (lpn / lhn, dbp / lhn)
    """
    return lpn_mm / lhn_mm, dbp_mm / lhn_mm


def percentile_table_rows():
    """Reference table as a list of dicts, one per week"""
    return [
        {
            'week': week,
            'thresholds': {f'p{band}': value for band, value in zip(PERCENTILE_BANDS, thresholds)},
        }
        for week, thresholds in sorted(PERCENTILE_TABLE.items())
    ]
