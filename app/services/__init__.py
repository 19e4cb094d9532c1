"""
Services Package

Exports all services for easy importing.
"""

from app.services.errors import StoreError, NoRecordError, InvalidCredentialsError, DuplicateEmailError
from app.services.snippets import insert_snippet, get_snippet, latest_snippets
from app.services.users import insert_user, authenticate, get_user

__all__ = [
    'StoreError',
    'NoRecordError',
    'InvalidCredentialsError',
    'DuplicateEmailError',
    'insert_snippet',
    'get_snippet',
    'latest_snippets',
    'insert_user',
    'authenticate',
    'get_user'
]
