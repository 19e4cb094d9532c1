"""
Error Handlers

Client errors answer with their status text. Anything else is logged with its
traceback and answered with a bare 500.
"""

import logging

from flask import Response
from werkzeug.exceptions import HTTPException, InternalServerError
from werkzeug.http import HTTP_STATUS_CODES

logger = logging.getLogger(__name__)


def handle_client_error(e):
    """Plain-text body with the status name, e.g. ``Not Found``."""
    response = e.get_response()
    response.set_data(e.name)
    response.mimetype = 'text/plain'
    return response


def handle_server_error(e):
    # Flask has already logged the original exception with its traceback.
    original = getattr(e, 'original_exception', None)
    if original is not None:
        logger.error('Recovered from %s: %s', type(original).__name__, original)

    response = Response(HTTP_STATUS_CODES[500], status=500, mimetype='text/plain')
    response.headers['Connection'] = 'close'
    return response


def register_error_handlers(app):
    app.register_error_handler(InternalServerError, handle_server_error)
    app.register_error_handler(HTTPException, handle_client_error)
