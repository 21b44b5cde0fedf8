"""Main Flask application for the showdown service."""

import logging

from flask import Flask, jsonify

from showdown_api.config import Config, get_config
from showdown_api.logging_setup import setup_logging
from showdown_api.routes.result_routes import result_bp

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Register blueprints
    app.register_blueprint(result_bp)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"success": False, "error": "Not found"}), 404

    @app.route("/health")
    def health():
        """Liveness probe."""
        return jsonify({"success": True, "status": "ok"})

    logger.debug(f"Created app with {config_class.__name__}")
    return app


if __name__ == "__main__":
    config_class = get_config()
    setup_logging(config_class.LOG_LEVEL)

    app = create_app(config_class)

    print("Starting showdown service...")
    print("Compare hands at: http://localhost:5000/result?player1Hand=...&player2Hand=...")

    app.run(debug=config_class.DEBUG, host="0.0.0.0", port=5000)
