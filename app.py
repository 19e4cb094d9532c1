"""
Snippetbox
Application Entry Point

Serves the application over HTTPS:

    python app.py -addr=:4000 -dsn=sqlite:///instance/snippetbox.db
"""

import logging
import ssl

import click

from app import create_app
from app.config import Config

logger = logging.getLogger('app.server')

# ECDHE with AEAD ciphers only; TLS 1.3 suites are not configurable here.
TLS12_CIPHERS = ':'.join([
    'ECDHE-ECDSA-AES256-GCM-SHA384',
    'ECDHE-RSA-AES256-GCM-SHA384',
    'ECDHE-ECDSA-CHACHA20-POLY1305',
    'ECDHE-RSA-CHACHA20-POLY1305',
    'ECDHE-ECDSA-AES128-GCM-SHA256',
    'ECDHE-RSA-AES128-GCM-SHA256',
])


def split_addr(addr):
    """Split a ``host:port`` address; an empty host listens on every interface."""
    host, sep, port = addr.rpartition(':')
    if not sep or not port.isdigit():
        raise click.BadParameter(f'invalid address {addr!r}', param_hint='addr')
    return host or '0.0.0.0', int(port)


def tls_context(cert_file, key_file):
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    context.maximum_version = ssl.TLSVersion.TLSv1_3
    context.set_ciphers(TLS12_CIPHERS)
    context.load_cert_chain(cert_file, key_file)
    return context


@click.command()
@click.option('-addr', '--addr', default=Config.ADDR, show_default=True, help='HTTP network address')
@click.option('-dsn', '--dsn', default=None, help='Database URL (defaults to DATABASE_URL or SQLite)')
@click.option('-tls-cert', '--tls-cert', 'tls_cert', default=Config.TLS_CERT_FILE, show_default=True,
              help='TLS certificate file')
@click.option('-tls-key', '--tls-key', 'tls_key', default=Config.TLS_KEY_FILE, show_default=True,
              help='TLS private key file')
def main(addr, dsn, tls_cert, tls_key):
    host, port = split_addr(addr)
    overrides = {'ADDR': addr}
    if dsn:
        overrides['SQLALCHEMY_DATABASE_URI'] = dsn

    app = create_app(Config, overrides)
    logger.info('Starting server on %s', addr)
    app.run(host=host, port=port, ssl_context=tls_context(tls_cert, tls_key))


if __name__ == '__main__':
    main()
