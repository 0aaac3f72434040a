"""
Calculator API Routes
Nasal bone percentile and LPN/LHN, DBP/LHN ratios
"""
from flask import Blueprint, request, jsonify, current_app
from nasal_bone.services.evaluator_service import RawInput, InvalidMeasurements, evaluate
from nasal_bone.services.interpretation_service import interpret, NORMAL_THRESHOLDS
from nasal_bone.utils.i18n import SUPPORTED_LANGUAGES, get_translation, normalize_language
from nasal_bone.utils.ob_calculators import PERCENTILE_BANDS, percentile_table_rows
import logging

logger = logging.getLogger(__name__)

calculator_bp = Blueprint('calculator', __name__, url_prefix='/api/calculator')


def _request_language(body=None):
    """lang query param, then lang body field, then Accept-Language, then config default"""
    lang = request.args.get('lang') or (body or {}).get('lang')
    if not isinstance(lang, str):
        lang = None
    if not lang:
        lang = request.accept_languages.best_match(SUPPORTED_LANGUAGES)
    return normalize_language(lang or current_app.config.get('DEFAULT_LANGUAGE'))


def _request_fields():
    """Measurement fields from a JSON body or a submitted form"""
    if request.is_json:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return None
        return body
    return request.form


@calculator_bp.route('/evaluate', methods=['POST'])
def evaluate_measurements():
    """
    Evaluate nasal bone measurements

    Body (JSON or form):
        gestational_weeks / gaWeeks: 20-23
        gestational_days / gaDays: 0-6
        nasal_bone_length / lhn: mm
        prenasal_length / lpn: mm
        biparietal_diameter / dbp: mm
        lang: 'es' or 'en' (optional)
    """
    body = _request_fields()
    if body is None:
        return jsonify({
            'success': False,
            'error': 'Request body must be a JSON object'
        }), 400

    language = _request_language(body)
    raw = RawInput.from_mapping(body)

    try:
        result = evaluate(raw, language)
    except InvalidMeasurements as e:
        return jsonify({
            'success': False,
            'error': get_translation('fix_errors', language),
            'errors': [error.to_dict() for error in e.errors],
            'messages': e.messages,
        }), 400

    return jsonify({
        'success': True,
        'data': {
            'language': language,
            'result': result.to_dict(),
            'interpretation': interpret(result, language),
        }
    })


@calculator_bp.route('/percentile-table', methods=['GET'])
def percentile_table():
    """Nasal bone reference table by gestational week"""
    return jsonify({
        'success': True,
        'data': {
            'bands': list(PERCENTILE_BANDS),
            'weeks': percentile_table_rows(),
            'normal_thresholds': NORMAL_THRESHOLDS,
        }
    })
