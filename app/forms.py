"""
Forms

Flask-WTF form classes for snippet creation, signup and login. Field error
messages are shown next to the inputs when a form is re-rendered.
"""

from flask_wtf import FlaskForm
from wtforms import PasswordField, RadioField, StringField, TextAreaField
from wtforms.validators import AnyOf, DataRequired, Length, Regexp

BLANK_MESSAGE = 'This field cannot be blank'

EXPIRY_CHOICES = [(365, 'One Year'), (7, 'One Week'), (1, 'One Day')]

# https://html.spec.whatwg.org/multipage/input.html#valid-e-mail-address
EMAIL_RX = (
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


def optional_int(value):
    """Coerce to int, leaving missing or non-numeric input as None."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def not_blank():
    return DataRequired(message=BLANK_MESSAGE)


def valid_email():
    return Regexp(EMAIL_RX, message='This field must be a valid email address')


class SnippetCreateForm(FlaskForm):
    title = StringField('Title', validators=[
        not_blank(),
        Length(max=100, message='This field cannot be more than 100 characters long'),
    ])
    content = TextAreaField('Content', validators=[not_blank()])
    expires = RadioField(
        'Delete in',
        choices=EXPIRY_CHOICES,
        coerce=optional_int,
        validate_choice=False,
        validators=[AnyOf([1, 7, 365], message='This field must equal 1, 7 or 365')],
    )


class UserSignupForm(FlaskForm):
    name = StringField('Name', validators=[not_blank()])
    email = StringField('Email', validators=[not_blank(), valid_email()])
    password = PasswordField('Password', validators=[
        not_blank(),
        Length(min=8, message='This field must be at least 8 characters long'),
    ])


class UserLoginForm(FlaskForm):
    email = StringField('Email', validators=[not_blank(), valid_email()])
    password = PasswordField('Password', validators=[not_blank()])
