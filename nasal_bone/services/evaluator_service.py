"""
Measurement Evaluator Service
Validates raw ultrasound measurements and produces the nasal bone indicators
"""
from dataclasses import dataclass, field
from typing import List
import math
import re
import logging

from nasal_bone.utils.i18n import get_translation
from nasal_bone.utils.ob_calculators import (
    MIN_TABLE_WEEK,
    MAX_TABLE_WEEK,
    classify_nasal_bone_percentile,
    compute_ratios,
)

logger = logging.getLogger(__name__)

MIN_GA_DAYS = 0
MAX_GA_DAYS = 6

_INTEGER_RE = re.compile(r'[+-]?\d+', re.ASCII)
_DECIMAL_RE = re.compile(r'[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?', re.ASCII)

# Original form field names -> RawInput attribute names
FIELD_ALIASES = {
    'gaWeeks': 'gestational_weeks',
    'gaDays': 'gestational_days',
    'lhn': 'nasal_bone_length',
    'lpn': 'prenasal_length',
    'dbp': 'biparietal_diameter',
}


@dataclass(frozen=True)
class RawInput:
    """The five measurement fields exactly as typed by the user."""
    gestational_weeks: str = ''
    gestational_days: str = ''
    nasal_bone_length: str = ''
    prenasal_length: str = ''
    biparietal_diameter: str = ''

    @classmethod
    def from_mapping(cls, data):
        """
        Build from a dict / form, accepting snake_case or the original
        form names (gaWeeks, gaDays, lhn, lpn, dbp). Missing keys are blank.
        """
        values = {}
        for alias, name in FIELD_ALIASES.items():
            value = data.get(name)
            if value is None:
                value = data.get(alias)
            values[name] = '' if value is None else str(value)
        return cls(**values)


@dataclass(frozen=True)
class ValidationError:
    """One failed field check."""
    code: str
    field: str
    message: str

    def to_dict(self):
        return {'code': self.code, 'field': self.field, 'message': self.message}


@dataclass(frozen=True)
class ValidationResult:
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self):
        return not self.errors

    @property
    def messages(self):
        return [error.message for error in self.errors]


@dataclass(frozen=True)
class CalculationResult:
    nasal_bone_percentile: int
    prenasal_to_nasal_ratio: float
    biparietal_to_nasal_ratio: float

    def to_dict(self):
        return {
            'nasal_bone_percentile': self.nasal_bone_percentile,
            'prenasal_to_nasal_ratio': self.prenasal_to_nasal_ratio,
            'biparietal_to_nasal_ratio': self.biparietal_to_nasal_ratio,
        }


class InvalidMeasurements(ValueError):
    """Raised by evaluate() with every failed check, in check order."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__('; '.join(error.message for error in self.errors))

    @property
    def messages(self):
        return [error.message for error in self.errors]


def parse_int(value):
    """Whole number from text, or None if blank / not an integer"""
    text = (value or '').strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # past the interpreter's int string conversion limit
        return None


def parse_float(value):
    """Finite decimal number from text, or None if blank / not a number"""
    text = (value or '').strip()
    if not _DECIMAL_RE.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def _in_range(value, low, high):
    return value is not None and low <= value <= high


def _positive(value):
    return value is not None and value > 0


# (field, error code, parser, predicate), in the order errors are reported
_CHECKS = (
    ('gestational_weeks', 'gestational_weeks_out_of_range', parse_int,
     lambda v: _in_range(v, MIN_TABLE_WEEK, MAX_TABLE_WEEK)),
    ('gestational_days', 'gestational_days_out_of_range', parse_int,
     lambda v: _in_range(v, MIN_GA_DAYS, MAX_GA_DAYS)),
    ('nasal_bone_length', 'nasal_bone_length_not_positive', parse_float, _positive),
    ('prenasal_length', 'prenasal_length_not_positive', parse_float, _positive),
    ('biparietal_diameter', 'biparietal_diameter_not_positive', parse_float, _positive),
)


def validate(raw, language='en'):
    """
    Run every field check and collect all failures

    A blank or non-numeric field fails its check the same way an
    out-of-range value does.

    Args:
        raw: RawInput
        language: Language for the error messages ('en' or 'es')

    Returns:
        ValidationResult: errors in check order (empty when valid)
    """
    errors = []
    for field_name, code, parser, predicate in _CHECKS:
        if not predicate(parser(getattr(raw, field_name))):
            errors.append(ValidationError(
                code=code,
                field=field_name,
                message=get_translation(code, language),
            ))
    return ValidationResult(errors=errors)


def evaluate(raw, language='en'):
    """
    Validate and compute the nasal bone percentile and ratios

    Nothing is computed unless every check passes.

    Args:
        raw: RawInput
        language: Language for the error messages ('en' or 'es')

    Returns:
        CalculationResult

    Raises:
        InvalidMeasurements: if any check fails
    """
    validation = validate(raw, language)
    if not validation.is_valid:
        logger.info("Rejected measurements: %s", [e.code for e in validation.errors])
        raise InvalidMeasurements(validation.errors)

    ga_weeks = parse_int(raw.gestational_weeks)
    lhn = parse_float(raw.nasal_bone_length)
    lpn = parse_float(raw.prenasal_length)
    dbp = parse_float(raw.biparietal_diameter)

    percentile = classify_nasal_bone_percentile(ga_weeks, lhn)
    lpn_lhn, dbp_lhn = compute_ratios(lhn, lpn, dbp)

    logger.debug("Evaluated GA %sw LHN %s -> p%s, LPN/LHN %.4f, DBP/LHN %.4f",
                 ga_weeks, lhn, percentile, lpn_lhn, dbp_lhn)
    return CalculationResult(
        nasal_bone_percentile=percentile,
        prenasal_to_nasal_ratio=lpn_lhn,
        biparietal_to_nasal_ratio=dbp_lhn,
    )

