from flask import Flask, jsonify, request
import logging
import os

# Setup basic logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s: %(message)s'
)
logger = logging.getLogger(__name__)


def _setup_file_logging(app):
    """Rotating log file for non-debug runs"""
    from logging.handlers import RotatingFileHandler

    log_file = app.config.get('LOG_FILE', 'logs/app.log')
    # app.logger is shared by every app built from this package
    for handler in app.logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == os.path.abspath(log_file):
            return

    log_dir = os.path.dirname(log_file)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10240000,
        backupCount=10
    )
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
    ))
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    file_handler.setLevel(level)
    app.logger.addHandler(file_handler)
    app.logger.setLevel(level)
    app.logger.info('Application startup')


def create_app(config_name=None):
    """Create Flask application factory"""
    app = Flask(__name__)

    # Load configuration
    from nasal_bone.config import config, get_config
    if config_name:
        config_class = config.get(config_name, config['default'])
    else:
        config_class = get_config()
    if hasattr(config_class, 'check'):
        config_class.check()
    app.config.from_object(config_class)

    # Ensure production mode if FLASK_ENV is production
    if os.getenv('FLASK_ENV') == 'production' and not config_name:
        app.config['DEBUG'] = False
        app.config['TESTING'] = False

    logging.getLogger('nasal_bone').setLevel(
        getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    )

    # Initialize CORS
    from nasal_bone.utils.cors import init_cors
    init_cors(app)

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({
            'success': False,
            'error': 'Bad request'
        }), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'success': False,
            'error': 'Endpoint not found'
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'success': False,
            'error': 'Method not allowed'
        }), 405

    @app.errorhandler(413)
    def payload_too_large(error):
        return jsonify({
            'success': False,
            'error': 'Request body too large'
        }), 413

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal Server Error: {error}", exc_info=True)
        return jsonify({
            'success': False,
            'error': 'Internal server error. Check server logs for details.'
        }), 500

    @app.errorhandler(Exception)
    def handle_exception(e):
        from werkzeug.exceptions import HTTPException
        if isinstance(e, HTTPException):
            return e
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        error_msg = 'An error occurred' if not app.debug else f'An error occurred: {str(e)}'
        return jsonify({
            'success': False,
            'error': error_msg
        }), 500

    # Setup logging
    if not app.debug and not app.testing:
        _setup_file_logging(app)

    # Security headers middleware
    @app.after_request
    def set_security_headers(response):
        """Add security headers to all responses"""
        if not app.debug:
            response.headers['X-Content-Type-Options'] = 'nosniff'
            response.headers['X-Frame-Options'] = 'DENY'
            response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
            # Only add HSTS if using HTTPS
            if request.is_secure:
                response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response

    # Register blueprints
    from .routes import calculator_bp, health_bp
    app.register_blueprint(health_bp)  # Register health check first
    app.register_blueprint(calculator_bp)

    from .cli import register_cli
    register_cli(app)

    return app
