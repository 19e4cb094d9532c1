"""
User Services

Signup, credential checks and existence lookups against the users table.
"""

import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from app.extensions import db
from app.models import User
from app.services.errors import DuplicateEmailError, InvalidCredentialsError

logger = logging.getLogger(__name__)


def insert_user(name, email, password):
    """Create a user with a hashed password.

    Raises:
        DuplicateEmailError: if the email address is already registered
    """
    user = User(
        name=name,
        email=email,
        hashed_password=generate_password_hash(password, method='pbkdf2:sha256'),
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        # The unique index on email is the only constraint a well-formed
        # signup can violate.
        if 'email' in str(e.orig).lower():
            raise DuplicateEmailError(email) from e
        raise
    logger.info('Created user %s', user.id)
    return user.id


def authenticate(email, password):
    """Return the id of the user matching email and password.

    Raises:
        InvalidCredentialsError: if the email is unknown or the password is wrong
    """
    user = User.query.filter_by(email=email).first()
    if user is None or not check_password_hash(user.hashed_password, password):
        raise InvalidCredentialsError(email)
    return user.id


def get_user(user_id):
    return db.session.get(User, user_id)
