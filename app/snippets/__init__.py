"""
Snippets Blueprint

Home page listing, snippet view and snippet creation.
"""

from flask import Blueprint

snippets_bp = Blueprint('snippets', __name__)

from app.snippets import routes  # noqa: E402, F401
