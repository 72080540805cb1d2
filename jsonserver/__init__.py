from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from .config import Config
from .errors import EndpointNotFound, JsonServerError
from .extensions import cors, init_engine
from .filters import register_filters

AVAILABLE_ENDPOINTS = [
    "GET /",
    "GET /collections",
    "GET /:collection",
    "GET /:collection/:id",
    "POST /:collection",
    "PUT /:collection/:id",
    "DELETE /:collection/:id",
]


def create_app(config_class: type[Config] = Config):
    app = Flask(__name__, template_folder="templates", static_folder=None)
    app.config.from_object(config_class)
    app.json.sort_keys = False
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Extensions
    cors.init_app(app)
    init_engine(app)

    # Filters
    register_filters(app)

    # Logging + error handling
    register_request_logging(app)
    register_error_handlers(app)

    # Blueprints
    from .routes.pages import bp as pages_bp
    from .routes.api import bp as api
    from .routes.collections_api import bp as collections_api

    app.register_blueprint(pages_bp)
    app.register_blueprint(api)
    # Catch-all collection routes go last
    app.register_blueprint(collections_api)

    return app


def register_request_logging(app: Flask):
    @app.before_request
    def _log_request():
        app.logger.info("%s %s", request.method, request.full_path.rstrip("?"))

    @app.after_request
    def _log_response(response):
        app.logger.info("%s %s - %s", request.method, request.full_path.rstrip("?"), response.status_code)
        return response


def register_error_handlers(app: Flask):
    @app.errorhandler(JsonServerError)
    def _handle_jsonserver_error(e: JsonServerError):
        if e.status_code >= 500:
            app.logger.error("%s %s failed: %s", request.method, request.path, e.message)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def _handle_http_error(e: HTTPException):
        if isinstance(e, (NotFound, MethodNotAllowed)):
            err = EndpointNotFound(f"The endpoint {request.method} {request.path} does not exist")
            body = err.to_dict()
            body["availableEndpoints"] = AVAILABLE_ENDPOINTS
            return jsonify(body), err.status_code
        return jsonify({"error": e.name, "message": e.description}), e.code

    @app.errorhandler(Exception)
    def _handle_unexpected(e: Exception):
        app.logger.exception("Unhandled error")
        return jsonify({
            "error": "Internal server error",
            "message": str(e) or "An unexpected error occurred",
        }), 500
