"""
CORS Configuration
The calculator API is called from a browser form hosted elsewhere
"""

CORS_CONFIG = {
    "methods": ["GET", "POST", "OPTIONS"],
    "allow_headers": [
        "Content-Type",
        "Accept",
        "Accept-Language",
        "Origin",
    ],
    "max_age": 86400,  # 24 hours
}


def parse_origins(value):
    """'*' or a comma-separated origin list"""
    if not value or value.strip() == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def init_cors(app):
    """
    Initialize CORS for the Flask application
    """
    from flask_cors import CORS

    origins = parse_origins(app.config.get('CORS_ORIGINS', '*'))
    CORS(app,
         resources={r"/api/*": {"origins": origins}},
         methods=CORS_CONFIG["methods"],
         allow_headers=CORS_CONFIG["allow_headers"],
         max_age=CORS_CONFIG["max_age"])

    app.logger.info("CORS enabled for origins: %s", origins)
