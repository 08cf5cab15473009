import logging

from flask import Flask, request
from sqlalchemy.exc import OperationalError

from .config import Config
from .extensions import db, jwt, cors, migrate
from .logging_config import setup_logging
from .utils.api import api_error

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_class)
    config_class.init_app(app)

    setup_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Init extensions
    db.init_app(app)
    jwt.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})
    migrate.init_app(app, db)

    # Register blueprints
    from .auth import bp as auth_bp; app.register_blueprint(auth_bp)
    from .cookie import bp as cookie_bp; app.register_blueprint(cookie_bp)
    from .package_option import bp as package_option_bp; app.register_blueprint(package_option_bp)
    from .admin import bp as admin_bp, api_bp as admin_api_bp
    app.register_blueprint(admin_bp)
    app.register_blueprint(admin_api_bp)

    from .middleware import admin_gate
    app.before_request(admin_gate)

    from .cli import register_cli
    register_cli(app)

    @app.get("/")
    def health():
        return {"ok": True, "msg": "API running"}

    @app.errorhandler(404)
    def not_found(e):
        if request.path.startswith("/api/"):
            return api_error("Not found"), 404
        return e

    @app.errorhandler(500)
    def server_error(e):
        original = getattr(e, "original_exception", None)
        logger.error("Unhandled error on %s %s: %r", request.method, request.path, original or e)
        return api_error("Server error"), 500

    with app.app_context():
        from .seed import seed_database
        try:
            db.create_all()
            seed_database()
        except OperationalError as e:
            logger.error("OperationalError during database initialization: %s", e)

    return app
