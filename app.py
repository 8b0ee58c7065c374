import os
import logging
from datetime import datetime
from uuid import uuid4

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --- Flask specific imports ---
from flask import Flask, request, jsonify, g
from flask_cors import CORS

# --- Import our configuration and the library services ---
from config import Config
from trackhub.database.db_manager import db, initialize_database, dispose_database
from trackhub.domain.library import TrackService, UserService
from trackhub.interfaces.http.routes import (
    seed_bp,
    track_bp,
    user_bp,
    health_bp,
)
from trackhub.observability import configure_structured_logging, metrics_blueprint
from trackhub.settings import load_app_settings


logger = logging.getLogger(__name__)


def configure_logging(log_dir: str, enable_console: bool = False) -> str:
    """Send root logging to a per-run file, plus WARNING+ to the console if enabled.

    Returns the path to the created log file.
    """
    os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
    log_filename = f"log-{timestamp}"
    log_path = os.path.join(log_dir, log_filename)

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    # Preserve structured handlers; remove existing FileHandlers to avoid duplicates
    root.handlers = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    # Quiet Flask/Werkzeug own console handlers; let them propagate to root
    for name in ("werkzeug", "flask.app"):
        _l = logging.getLogger(name)
        _l.setLevel(logging.INFO)
        _l.handlers = []
        _l.propagate = True

    return log_path


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)
    configure_structured_logging(app)

    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get('X-Request-ID') or uuid4().hex

    @app.after_request
    def _inject_request_id(response):
        if getattr(g, 'request_id', None):
            response.headers.setdefault('X-Request-ID', g.request_id)
        return response

    allowed_origins = sorted({
        origin.strip()
        for origin in app.config['CORS_ALLOWED_ORIGINS']
        if origin and origin.strip() and origin.strip() != "*"
    })
    CORS(app, resources={r"/*": {"origins": allowed_origins}})

    @app.errorhandler(404)
    def _not_found(_error):
        return jsonify({'message': "Resource not found."}), 404

    @app.errorhandler(405)
    def _method_not_allowed(_error):
        return jsonify({'message': "Method not allowed."}), 405

    # Bind the storage client to this app and create tables
    initialize_database(app)

    # Services share the app-scoped session; routes reach them via app.extensions
    app.extensions['track_service'] = TrackService(db.session)
    app.extensions['user_service'] = UserService(db.session)

    # --- Register Blueprints ---
    app.register_blueprint(seed_bp)
    app.register_blueprint(track_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(metrics_blueprint)

    return app


if __name__ == '__main__':
    settings = load_app_settings()

    # Configure logging:
    # - In debug with reloader: only in the child process to avoid duplicate files
    # - In non-debug: always configure here
    if settings.debug:
        if os.environ.get('WERKZEUG_RUN_MAIN') == 'true':
            log_file_path = configure_logging(settings.log_dir, settings.enable_console_logs)
            logger.info("File logging initialized at %s", log_file_path)
    else:
        log_file_path = configure_logging(settings.log_dir, settings.enable_console_logs)
        logger.info("File logging initialized at %s", log_file_path)

    app = create_app({"SQLALCHEMY_DATABASE_URI": settings.database_url})
    # Route app.logger through root handlers, keep levels consistent
    app.logger.handlers = []
    app.logger.setLevel(logging.INFO)
    app.logger.propagate = True
    logger.info("Server is running on Port : %s", settings.port)
    try:
        app.run(debug=settings.debug, host=settings.host, port=settings.port, threaded=True)
    finally:
        dispose_database(app)
