"""
Snippetbox - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os
from datetime import datetime

from flask import Flask, g
from app.extensions import db, login_manager, csrf
from app.config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config, overrides=None):
    """Create and configure the Flask application.

    Request hooks are registered in pipeline order: request logging and
    security headers, then the database session, CSRF validation and finally
    identity propagation. Error handlers recover from anything the views raise.

    Args:
        config_class: Configuration class to use (default: Config)
        overrides: Optional mapping applied on top of the config class

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    from app.log import configure_logging
    configure_logging(app)

    from app.errors import register_error_handlers
    from app import middleware, sessions
    register_error_handlers(app)
    middleware.init_logging_and_headers(app)

    # Initialize extensions
    db.init_app(app)
    sessions.init_app(app)
    csrf.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message = None
    middleware.init_identity(app)

    # Register blueprints
    from app.auth import auth_bp
    from app.snippets import snippets_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(snippets_bp)

    # Data shared by every template
    @app.context_processor
    def inject_template_data():
        return dict(
            current_year=datetime.now().year,
            is_authenticated=g.get('is_authenticated', False),
        )

    @app.template_filter('human_date')
    def human_date(value):
        if value is None:
            return ''
        return value.strftime('%d %b %Y at %H:%M')

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and not app.testing:
            os.makedirs(os.path.join(Config.basedir, 'instance'), exist_ok=True)
        db.create_all()

    logger.debug('Application created with %s', config_class.__name__)
    return app


# User loader for Flask-Login
@login_manager.user_loader
def load_user(user_id):
    """Load the session's user, dropping the id if the account is gone."""
    from flask import session
    from app.services import get_user

    try:
        user = get_user(int(user_id))
    except ValueError:
        user = None
    if user is None:
        logger.warning('Session refers to missing user %s; treating as anonymous', user_id)
        session.pop('_user_id', None)
    return user
