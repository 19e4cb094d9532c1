"""
Models Package

Exports all models for easy importing.
"""

from app.models.user import User
from app.models.snippet import Snippet
from app.models.session import SessionRecord

__all__ = ['User', 'Snippet', 'SessionRecord']
