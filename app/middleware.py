"""
Request Middleware

Hooks that run around every request. Flask runs ``before_request`` hooks in registration
order, so ``create_app`` registers these around the session and CSRF layers
in the order the pipeline needs.
"""

import logging

from flask import g, request, session
from flask_login import current_user

logger = logging.getLogger(__name__)

SECURE_HEADERS = {
    'Content-Security-Policy':
        "default-src 'self'; style-src 'self' fonts.googleapis.com; font-src fonts.gstatic.com",
    'Referrer-Policy': 'origin-when-cross-origin',
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'deny',
    'X-XSS-Protection': '0',
}


def log_request():
    logger.info(
        '%s - %s %s %s',
        request.remote_addr,
        request.environ.get('SERVER_PROTOCOL', 'HTTP/1.1'),
        request.method,
        request.url,
    )


def secure_headers(response):
    for name, value in SECURE_HEADERS.items():
        response.headers[name] = value
    return response


def propagate_identity():
    """Resolve the session's user once and expose the result on ``g``."""
    g.is_authenticated = current_user.is_authenticated


def init_logging_and_headers(app):
    """Register the outer layers, which must run before sessions and CSRF."""
    app.before_request(log_request)
    app.after_request(secure_headers)


def init_identity(app):
    """Register identity propagation, which must run after CSRF validation."""
    app.before_request(propagate_identity)


def pop_next_path(default):
    """Post-login redirect target saved by the login requirement.

    Only local absolute paths are honoured.
    """
    target = session.pop('next', None)
    if not target or not target.startswith('/') or target.startswith('//'):
        return default
    return target
