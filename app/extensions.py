"""
Flask Extensions

Created here and initialized in the application factory so blueprints can
import them without circular imports.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect

# Database instance
db = SQLAlchemy()

# Login manager for user authentication
login_manager = LoginManager()

# CSRF protection for every state-changing request
csrf = CSRFProtect()
