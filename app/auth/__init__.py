"""
Auth Blueprint

Signup, login and logout.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/user')

from app.auth import routes  # noqa: E402, F401
