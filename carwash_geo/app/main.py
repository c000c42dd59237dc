from __future__ import annotations

from flask import Flask

from .routes.carwashes import carwashes_bp
from .utils import error_response


def create_app() -> Flask:
    app = Flask(__name__)
    app.register_blueprint(carwashes_bp)

    @app.errorhandler(404)
    def not_found(_exc):
        return error_response("NOT_FOUND", "Resource not found", 404)

    return app
