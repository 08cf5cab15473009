# cookie_shop/cli.py
import click
from flask.cli import with_appcontext

from .extensions import db
from .model import User
from .auth.passwords import hash_password
from .cookie.export import cookies_frame
from .seed import seed_database, reset_database


@click.command("create-admin")
@click.option("--email", required=True)
@click.option("--password", required=True)
@click.option("--first-name", default="Admin", show_default=True)
@click.option("--last-name", default="Admin", show_default=True)
@with_appcontext
def create_admin(email, password, first_name, last_name):
    email = email.strip().lower()
    if User.query.filter_by(email=email).first():
        click.echo("Email already exists"); return
    u = User(first_name=first_name, last_name=last_name, email=email,
             password=hash_password(password), is_admin=1)
    db.session.add(u); db.session.commit()
    click.echo(f"Admin created: {u.id} {u.email}")


@click.command("seed")
@with_appcontext
def seed():
    seed_database()
    click.echo("Seed data verified")


@click.command("reset-db")
@with_appcontext
def reset_db():
    removed = reset_database()
    click.echo(f"Removed {removed} cookies")


@click.command("export-cookies")
@click.argument("path", type=click.Path(dir_okay=False, writable=True))
@with_appcontext
def export_cookies(path):
    df = cookies_frame()
    df.to_csv(path, index=False)
    click.echo(f"Exported {len(df)} cookies to {path}")


def register_cli(app):
    app.cli.add_command(create_admin)
    app.cli.add_command(seed)
    app.cli.add_command(reset_db)
    app.cli.add_command(export_cookies)
