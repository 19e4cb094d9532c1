"""
Store Errors

Raised by the snippet and user services so handlers never have to inspect
database exceptions themselves.
"""


class StoreError(Exception):
    """Base class for errors raised by the data services"""


class NoRecordError(StoreError):
    """No matching record, or the record has expired"""


class InvalidCredentialsError(StoreError):
    """Email unknown or password does not match"""


class DuplicateEmailError(StoreError):
    """A user with this email address already exists"""
