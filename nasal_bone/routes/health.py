"""
Health check endpoints for monitoring and load balancers
"""
from flask import Blueprint, jsonify
from datetime import datetime, timezone

from nasal_bone.services.evaluator_service import RawInput, evaluate

health_bp = Blueprint('health', __name__, url_prefix='/health')

# Known-good measurement used by the readiness probe
_PROBE_INPUT = RawInput('21', '3', '4.50', '4.00', '50.00')


def _now():
    return datetime.now(timezone.utc).isoformat()


@health_bp.route('', methods=['GET'])
@health_bp.route('/ping', methods=['GET'])
def health_check():
    """Basic health check"""
    return jsonify({
        'status': 'healthy',
        'timestamp': _now(),
        'service': 'nasal-bone-calculator'
    }), 200


@health_bp.route('/ready', methods=['GET'])
def readiness_check():
    """Readiness check - runs one evaluation end to end"""
    try:
        evaluate(_PROBE_INPUT)
        calculator_status = 'ok'
    except Exception as e:
        calculator_status = f'error: {str(e)}'

    return jsonify({
        'status': 'ready' if calculator_status == 'ok' else 'not_ready',
        'calculator': calculator_status,
        'timestamp': _now()
    }), 200 if calculator_status == 'ok' else 503


@health_bp.route('/live', methods=['GET'])
def liveness_check():
    """Liveness check for Kubernetes/containers"""
    return jsonify({
        'status': 'alive',
        'timestamp': _now()
    }), 200
