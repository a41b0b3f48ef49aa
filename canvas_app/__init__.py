# canvas_app/__init__.py

import logging
from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, NotFound, MethodNotAllowed
from .config import Config

db = SQLAlchemy()
migrate = Migrate()

LOG_FORMAT = '[%(asctime)s] %(levelname)s: %(message)s'


def _configure_logging(app):
    # Configure logging to show INFO level messages
    app.logger.setLevel(logging.INFO)
    # app.logger is shared by every app built in the same process (tests);
    # only attach our handler once.
    if any(getattr(h, '_canvas_handler', False) for h in app.logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._canvas_handler = True
    app.logger.addHandler(handler)


def _register_error_handlers(app):
    from . import messages

    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def route_not_found(e):
        # Unknown paths and unsupported methods look the same to the frontend.
        return jsonify({"success": False, "message": messages.ROUTE_NOT_FOUND}), 404

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({"success": False, "message": e.description}), e.code

    @app.errorhandler(Exception)
    def unhandled_error(e):
        app.logger.error("Unhandled exception: %s", str(e), exc_info=True)
        return jsonify({"success": False, "message": messages.INTERNAL_ERROR}), 500


def create_app(config_class=Config):
    """
    Builds the Flask application and bootstraps the database.

    The returned app is ready to serve: the canvas table exists and holds its
    singleton row. A StorageError from the bootstrap is not caught here; the
    caller decides how to die.
    """
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)

    _configure_logging(app)

    app.logger.info("Environment check:")
    app.logger.info("PORT: %s", app.config['PORT'])
    app.logger.info("ACCESS_KEY: %s", 'Set' if app.config.get('ACCESS_KEY') else 'Not set')
    app.logger.info("ENVIRONMENT: %s", app.config['ENVIRONMENT'])

    db.init_app(app)
    migrate.init_app(app, db)

    # The frontend may be opened from any origin (file://, a CDN, localhost).
    CORS(app)

    # The shared secret is read once here and handed to the gate; nothing
    # else reads ACCESS_KEY from the config afterwards.
    from .access_gate import AccessGate
    app.extensions['access_gate'] = AccessGate(app.config['ACCESS_KEY'])

    # --- REGISTER BLUEPRINTS ---
    from .api.frontend import bp as frontend_bp
    from .api.canvas import bp as canvas_bp
    from .api.health import bp as health_bp
    from .auth import bp as auth_bp

    app.register_blueprint(frontend_bp)
    app.register_blueprint(canvas_bp, url_prefix='/api')
    app.register_blueprint(health_bp, url_prefix='/api')
    app.register_blueprint(auth_bp, url_prefix='/api')

    _register_error_handlers(app)

    with app.app_context():
        from . import models
        from .services.bootstrap import ensure_ready

        ensure_ready()

    return app
