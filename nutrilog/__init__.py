import logging

from flask import Flask
from flask_migrate import Migrate

from nutrilog.extensions import db, cors
from nutrilog.routes import register_routes
from nutrilog.utils.http import error


def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if str(app.config.get("SQLALCHEMY_DATABASE_URI", "")).startswith("postgres"):
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = app.config["POSTGRES_ENGINE_OPTIONS"]

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    Migrate(app, db)

    # Models must be imported before migrations/create_all see the metadata
    from nutrilog.models import user, food, diet_entry  # noqa: F401

    cors.init_app(app,
                  origins=app.config["CORS_ORIGINS"],
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    register_routes(app)

    @app.errorhandler(404)
    def not_found(_e):
        return error("NOT_FOUND", "Resource not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return error("METHOD_NOT_ALLOWED", "Method not allowed", 405)

    return app
