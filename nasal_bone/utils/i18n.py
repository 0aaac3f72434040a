"""
Internationalization (i18n) Utilities
Validation messages and result labels (Spanish & English)
"""
import logging

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = 'en'

# Translation dictionaries
TRANSLATIONS = {
    'en': {
        # Validation
        'gestational_weeks_out_of_range': 'gestational age weeks out of range',
        'gestational_days_out_of_range': 'days out of range',
        'nasal_bone_length_not_positive': 'nasal bone length must be positive',
        'prenasal_length_not_positive': 'prenasal length must be positive',
        'biparietal_diameter_not_positive': 'biparietal diameter must be positive',
        'fix_errors': 'Please fix the following errors:',
        # Fields
        'gestational_weeks': 'Gestational age (weeks)',
        'gestational_days': 'Days',
        'nasal_bone_length': 'Nasal bone length (LHN)',
        'prenasal_length': 'Prenasal length (LPN)',
        'biparietal_diameter': 'Biparietal diameter (DBP)',
        # Results
        'results': 'Results',
        'nasal_bone_percentile': 'Nasal bone percentile',
        'prenasal_to_nasal_ratio': 'LPN/LHN ratio',
        'biparietal_to_nasal_ratio': 'DBP/LHN ratio',
        'normal': 'Normal',
        'abnormal': 'Abnormal',
    },
    'es': {
        # Validation
        'gestational_weeks_out_of_range': 'La edad gestacional debe estar entre 20 y 23 semanas',
        'gestational_days_out_of_range': 'Los días deben estar entre 0 y 6',
        'nasal_bone_length_not_positive': 'La longitud del hueso nasal debe ser mayor a 0',
        'prenasal_length_not_positive': 'La longitud prenasal debe ser mayor a 0',
        'biparietal_diameter_not_positive': 'El diámetro biparietal debe ser mayor a 0',
        'fix_errors': 'Por favor corrige los siguientes errores:',
        # Fields
        'gestational_weeks': 'Edad gestacional (semanas)',
        'gestational_days': 'Días',
        'nasal_bone_length': 'Longitud de hueso nasal (LHN)',
        'prenasal_length': 'Longitud prenasal (LPN)',
        'biparietal_diameter': 'Diámetro biparietal (DBP)',
        # Results
        'results': 'Resultados',
        'nasal_bone_percentile': 'Percentil del hueso nasal',
        'prenasal_to_nasal_ratio': 'Relación LPN/LHN',
        'biparietal_to_nasal_ratio': 'Relación DBP/LHN',
        'normal': 'Normal',
        'abnormal': 'Anormal',
    }
}

SUPPORTED_LANGUAGES = tuple(TRANSLATIONS)


def normalize_language(language):
    """Return a supported language code, falling back to English"""
    if not isinstance(language, str) or not language:
        return DEFAULT_LANGUAGE
    lang = language.lower().split('-')[0]
    if lang not in TRANSLATIONS:
        logger.debug("Unsupported language %r, using %s", language, DEFAULT_LANGUAGE)
        return DEFAULT_LANGUAGE
    return lang


def get_translation(key, language='en', default=None):
    """
    Get translation for a key in the specified language

    Args:
        key: Translation key
        language: 'en' or 'es'
        default: Default value if key not found

    Returns:
        str: Translated text
    """
    translations = TRANSLATIONS[normalize_language(language)]
    return translations.get(key, default or key)
