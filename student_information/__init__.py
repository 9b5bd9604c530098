import click
from flask import Flask
from sqlalchemy.engine import make_url
from .extensions import db, register_engine_events

def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create the student, course and enrollment tables."""
        db.create_all()
        click.echo("Initialized the database")

def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    db.init_app(app)
    register_engine_events(app)

    from . import models

    register_commands(app)
    url = make_url(app.config["SQLALCHEMY_DATABASE_URI"])
    app.logger.info("Database: %s", url.render_as_string(hide_password=True))

    return app
