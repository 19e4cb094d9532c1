"""Create a user account from the command line.

    python scripts/create_user.py "Alice Jones" alice@example.com pa55word
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import click

from app import create_app
from app.services import DuplicateEmailError, insert_user


@click.command()
@click.argument('name')
@click.argument('email')
@click.argument('password')
def main(name, email, password):
    app = create_app()
    with app.app_context():
        try:
            user_id = insert_user(name, email, password)
        except DuplicateEmailError:
            raise click.ClickException(f'{email} is already registered')
        click.echo(f'Created user {user_id} ({email})')


if __name__ == '__main__':
    main()
