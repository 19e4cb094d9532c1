"""
Auth Decorators

Route-level gate for pages that need a logged-in user.
"""

from functools import wraps
from flask import make_response
from flask_login import current_user
from app.extensions import login_manager


def require_authentication(f):
    """Decorator to ensure the request comes from an authenticated user.

    - Anonymous requests are sent (303) to the login page; Flask-Login saves the
      requested path in the session for the redirect after login
    - Authenticated pages are never stored by browser or proxy caches
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            response = login_manager.unauthorized()
            response.status_code = 303
            return response
        response = make_response(f(*args, **kwargs))
        response.headers['Cache-Control'] = 'no-store'
        return response
    return wrapper
