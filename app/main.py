import argparse
import logging
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.middleware.proxy_fix import ProxyFix

from config_manager import ConfigManager
from learning_service.logging_config import setup_logging

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def create_app(
    config_manager: Optional[ConfigManager] = None,
    student_data_dir: Optional[Path] = None,
) -> Flask:
    """Build the Flask application and register every subsystem blueprint.

    Args:
        config_manager: Configuration source; a default ConfigManager is used if omitted
        student_data_dir: Override for the student data directory (tests use tmp_path)
    """
    app = Flask(__name__)
    app.wsgi_app = ProxyFix(
            app.wsgi_app,
            x_proto = 1,     # trust 1 hop for X-Forwarded-Proto
            x_host  = 1,     # trust 1 hop for X-Forwarded-Host
            x_prefix= 1)     # <-- pay attention to X-Forwarded-Prefix

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    config_manager = config_manager or ConfigManager()
    paths_config = config_manager.get_paths_config()
    recommendation_config = config_manager.get_recommendation_config()

    if student_data_dir is None:
        student_data_dir = PROJECT_ROOT / paths_config.student_data_dir

    # -------------------------------------------------------------------------
    # Subsystems
    # -------------------------------------------------------------------------

    from app.student_data.factory import create_student_data_module
    from app.user_management.factory import create_user_management_module
    from app.recommendations.factory import create_recommendations_module

    student_data_module = create_student_data_module(data_dir=Path(student_data_dir))
    user_management_module = create_user_management_module()
    recommendations_module = create_recommendations_module(
        student_store=student_data_module["store"],
        user_service=user_management_module["service"],
        recommendation_config=recommendation_config,
    )

    app.register_blueprint(user_management_module["blueprint"])
    app.register_blueprint(recommendations_module["blueprint"])

    app.extensions["student_store"] = student_data_module["store"]
    app.extensions["recommendation_engine"] = recommendations_module["engine"]

    # -------------------------------------------------------------------------
    # Routes
    # -------------------------------------------------------------------------

    @app.get("/actuator/health")
    def actuator_health():
        """Health check endpoint for monitoring tools and cloud platforms."""
        return jsonify({
            "status": "UP",
            "service": "learning-path-digest"
        }), 200

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "not-found", "path": request.path}), 404

    logger.info("Application created, student data in %s", Path(student_data_dir).resolve())
    return app


# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Flask application for learning recommendations")
    parser.add_argument("--port", type=int, help="Port to run the server on")
    parser.add_argument("--host", type=str, help="Host to bind the server to")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    config_manager = ConfigManager()
    app_config = config_manager.get_app_config()

    # Override configuration with command line arguments
    if args.port:
        app_config.port = args.port
    if args.host:
        app_config.host = args.host
    if args.debug:
        app_config.debug = args.debug

    setup_logging(debug=app_config.debug, log_file=app_config.log_file)
    app = create_app(config_manager)
    logger.info("Serving on %s:%s", app_config.host, app_config.port)
    app.run(
        host=app_config.host,
        port=app_config.port,
        debug=app_config.debug
    )
