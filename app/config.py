"""
Configuration settings for Snippetbox
"""
import os
from datetime import timedelta


class Config:
    """Flask application configuration"""

    # Flask secret key for signing CSRF tokens and flashes
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'snippetbox.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Sessions live in the database and expire 12 hours after the last write
    PERMANENT_SESSION_LIFETIME = timedelta(hours=12)
    SESSION_REFRESH_EACH_REQUEST = True
    SESSION_COOKIE_NAME = 'session'
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Flask-Login keeps the post-login redirect path in the session
    USE_SESSION_FOR_NEXT = True

    # Listener defaults (overridden from the command line)
    ADDR = ':4000'
    TLS_CERT_FILE = os.path.join(basedir, 'tls', 'cert.pem')
    TLS_KEY_FILE = os.path.join(basedir, 'tls', 'key.pem')

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Application settings
    LATEST_SNIPPETS_LIMIT = 10


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    WTF_CSRF_ENABLED = False
    SESSION_COOKIE_SECURE = False
    LOG_LEVEL = 'WARNING'
