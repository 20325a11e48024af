from flask import Flask, g, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from . import i18n
from .astro.engine import SwissEphemeris
from .auth import EXTENSION_KEY, BearerTokenAuth
from .config import Config
from .errors import InternalError, IruAstroError
from .logging_config import configure_logging
from .routes import EPHEMERIS_KEY, bp


def _error_response(message_key, error_body, status, errors=None):
    language = getattr(g, "language", i18n.DEFAULT_LANGUAGE)
    body = {
        "message": i18n.message(message_key, language),
        "error": error_body,
    }
    if errors is not None:
        body["errors"] = errors
    return jsonify(body), status


def create_app(config=None, access_token=None, ephemeris=None):
    """
    Build the API application.

    ``config`` may be a Config instance or a dict of overrides applied on top
    of the environment; ``access_token`` and ``ephemeris`` take precedence
    over both. Tests pass all three explicitly.
    """
    if config is None or isinstance(config, dict):
        config = Config(**(config or {}))
    if access_token is not None:
        config.ACCESS_TOKEN = access_token
    config.validate()

    app = Flask(__name__)
    app.config.update(config.to_dict())
    configure_logging(app)

    app.extensions[EXTENSION_KEY] = BearerTokenAuth(config.ACCESS_TOKEN)
    app.extensions[EPHEMERIS_KEY] = ephemeris or SwissEphemeris(config.EPHE_PATH)

    CORS(app, resources={r"/*": {"origins": config.ALLOWED_ORIGINS}})

    app.register_blueprint(bp)

    @app.errorhandler(IruAstroError)
    def handle_api_error(e):
        if e.status_code >= 500:
            app.logger.error(f"Calculation error: {e.message}")
        return _error_response(e.message_key, e.to_dict(), e.status_code, getattr(e, "errors", None))

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(e):
        return _error_response("methodNotAllowed", {
            "code": "METHOD_NOT_ALLOWED",
            "message": i18n.message("methodNotAllowed"),
            "details": {},
        }, 405)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return _error_response("notFound" if e.code == 404 else "internalError", {
            "code": (e.name or "HTTP_ERROR").upper().replace(" ", "_"),
            "message": e.description,
            "details": {},
        }, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        app.logger.exception(f"Unhandled error: {e}")
        err = InternalError.from_exception(e)
        return _error_response(err.message_key, err.to_dict(), err.status_code)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}, 200

    return app
