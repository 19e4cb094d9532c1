"""
Database Sessions

Server-side session store for Flask. The cookie carries only an opaque token;
the session data lives in the ``sessions`` table next to users and snippets.
"""

import logging
import secrets
from datetime import datetime, timezone

import click
from flask import session
from flask.cli import with_appcontext
from flask.json.tag import TaggedJSONSerializer
from flask.sessions import SessionInterface, SessionMixin
from werkzeug.datastructures import CallbackDict

from app.extensions import db
from app.models import SessionRecord
from app.models.clock import utcnow

logger = logging.getLogger(__name__)


def new_token():
    """43 character URL-safe token"""
    return secrets.token_urlsafe(32)


class DatabaseSession(CallbackDict, SessionMixin):
    """Session dict that remembers its token and whether it was changed."""

    def __init__(self, initial=None, token=None):
        def on_update(self):
            self.modified = True
            self.accessed = True

        super().__init__(initial, on_update)
        self.token = token
        self.new = token is None
        self.modified = False
        self.accessed = False
        self.renewed_from = None

    def __getitem__(self, key):
        self.accessed = True
        return super().__getitem__(key)

    def get(self, key, default=None):
        self.accessed = True
        return super().get(key, default)

    def setdefault(self, key, default=None):
        self.accessed = True
        return super().setdefault(key, default)

    def renew(self):
        """Move the data to a fresh token when the session is next saved."""
        if self.token is not None and self.renewed_from is None:
            self.renewed_from = self.token
        self.token = None
        self.modified = True


class DatabaseSessionInterface(SessionInterface):
    session_class = DatabaseSession
    serializer = TaggedJSONSerializer()

    def open_session(self, app, request):
        token = request.cookies.get(self.get_cookie_name(app))
        if not token:
            return self.session_class()

        record = db.session.get(SessionRecord, token)
        if record is None or record.expiry <= utcnow():
            return self.session_class()
        return self.session_class(self.serializer.loads(record.data), token=token)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)
        secure = self.get_cookie_secure(app)
        samesite = self.get_cookie_samesite(app)
        httponly = self.get_cookie_httponly(app)

        if session.accessed:
            response.vary.add('Cookie')

        if session.renewed_from is not None:
            self._delete_record(session.renewed_from)
            session.renewed_from = None

        if not session:
            if session.modified:
                if session.token is not None:
                    self._delete_record(session.token)
                response.delete_cookie(
                    name, domain=domain, path=path, secure=secure,
                    samesite=samesite, httponly=httponly,
                )
                response.vary.add('Cookie')
            return

        if not (session.modified or app.config['SESSION_REFRESH_EACH_REQUEST']):
            return

        if session.token is None:
            session.token = new_token()

        lifetime = app.permanent_session_lifetime
        record = SessionRecord(
            token=session.token,
            data=self.serializer.dumps(dict(session)),
            expiry=utcnow() + lifetime,
        )
        db.session.merge(record)
        db.session.commit()

        response.set_cookie(
            name,
            session.token,
            expires=datetime.now(timezone.utc) + lifetime,
            domain=domain,
            path=path,
            secure=secure,
            samesite=samesite,
            httponly=httponly,
        )
        response.vary.add('Cookie')

    def _delete_record(self, token):
        SessionRecord.query.filter_by(token=token).delete()
        db.session.commit()


def renew_session_token():
    """Issue a new session token for the current request, keeping its data.

    Called whenever the privilege level changes (login, logout).
    """
    session.renew()


def purge_expired_sessions():
    """Delete every session row past its expiry and return how many went."""
    count = SessionRecord.query.filter(SessionRecord.expiry <= utcnow()).delete()
    db.session.commit()
    logger.info('Purged %d expired sessions', count)
    return count


@click.command('purge-sessions')
@with_appcontext
def purge_sessions_command():
    """Delete expired sessions from the database."""
    count = purge_expired_sessions()
    click.echo(f'Deleted {count} expired sessions.')


def init_app(app):
    app.session_interface = DatabaseSessionInterface()
    app.cli.add_command(purge_sessions_command)
