"""
WSGI entry point for production deployment
Gunicorn / uWSGI target: wsgi:application

Set FLASK_ENV=production and SECRET_KEY before starting the server.
"""
import os

from nasal_bone import create_app

application = create_app(os.getenv('APP_CONFIG') or None)
