"""
Result interpretation for display
Normal / abnormal flags and two-decimal formatting of the evaluator output
"""
import logging

from nasal_bone.utils.i18n import get_translation

logger = logging.getLogger(__name__)

# Indicator -> value strictly above which it is reported as normal
NORMAL_THRESHOLDS = {
    'nasal_bone_percentile': 2.5,
    'prenasal_to_nasal_ratio': 0.8,
    'biparietal_to_nasal_ratio': 11,
}

DISPLAY_DECIMALS = 2


def is_normal(indicator, value):
    """True when value is above the indicator's normal threshold"""
    return value > NORMAL_THRESHOLDS[indicator]


def interpret(result, language='en'):
    """
    Annotate a CalculationResult for display

    Args:
        result: CalculationResult from the evaluator
        language: 'en' or 'es'

    Returns:
        list: one dict per indicator with label, value, formatted value,
              is_normal and a translated status
    """
    values = result.to_dict()
    interpretation = []
    for indicator in NORMAL_THRESHOLDS:
        value = values[indicator]
        normal = is_normal(indicator, value)
        interpretation.append({
            'indicator': indicator,
            'label': get_translation(indicator, language),
            'value': value,
            'formatted': f"{value:.{DISPLAY_DECIMALS}f}",
            'is_normal': normal,
            'status': get_translation('normal' if normal else 'abnormal', language),
        })
    return interpretation


def format_interpretation(interpretation):
    """Render interpretation entries as 'Label: value (Status)' lines"""
    return [f"{item['label']}: {item['formatted']} ({item['status']})" for item in interpretation]
