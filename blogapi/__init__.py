# blogapi/__init__.py
import logging

import click
from flask import Flask

from blogapi.config import Config, validate_config
from blogapi.errors import register_error_handlers
from blogapi.extensions import cors, db
from blogapi.routes import register_routes


def configure_logging(app):
    level = logging.getLevelName(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    if not isinstance(level, int):
        level = logging.INFO
    app.logger.setLevel(level)


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Crea las tablas que falten."""
        db.create_all()
        click.echo("Tablas creadas")


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    # Sin secreto o sin base de datos la app no arranca
    validate_config(app.config)
    configure_logging(app)

    # Inicializar extensiones
    db.init_app(app)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        allow_headers=["Content-Type", "Authorization"],
    )

    register_error_handlers(app)
    # Registrar blueprints centralizado
    register_routes(app)
    register_commands(app)

    return app
