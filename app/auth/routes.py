"""
Auth Routes

User signup, login and logout using Flask-Login on top of the database
session store.
"""

import logging

from flask import render_template, redirect, url_for, flash
from flask_login import login_user, logout_user
from app.auth import auth_bp
from app.auth.decorators import require_authentication
from app.forms import UserLoginForm, UserSignupForm
from app.middleware import pop_next_path
from app.services import (
    DuplicateEmailError,
    InvalidCredentialsError,
    authenticate,
    get_user,
    insert_user,
)
from app.sessions import renew_session_token

logger = logging.getLogger(__name__)


@auth_bp.route('/signup', methods=['GET', 'POST'])
def signup():
    """User signup route"""
    form = UserSignupForm()

    if form.validate_on_submit():
        try:
            insert_user(form.name.data.strip(), form.email.data.strip(), form.password.data)
        except DuplicateEmailError:
            form.email.errors.append('Email address is already in use')
        else:
            flash('Your signup was successful. Please log in.', 'success')
            return redirect(url_for('auth.login'), code=303)

    if form.is_submitted():
        return render_template('signup.html', form=form), 422
    return render_template('signup.html', form=form)


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    form = UserLoginForm()

    if form.validate_on_submit():
        try:
            user_id = authenticate(form.email.data.strip(), form.password.data)
        except InvalidCredentialsError:
            form.form_errors.append('Email or password is incorrect')
        else:
            renew_session_token()
            login_user(get_user(user_id))
            logger.info('User %s logged in', user_id)
            return redirect(pop_next_path(url_for('snippets.create')), code=303)

    if form.is_submitted():
        return render_template('login.html', form=form), 422
    return render_template('login.html', form=form)


@auth_bp.route('/logout', methods=['POST'])
@require_authentication
def logout():
    """User logout route"""
    logout_user()
    renew_session_token()
    flash("You've been logged out successfully!", 'success')
    return redirect(url_for('snippets.home'), code=303)
