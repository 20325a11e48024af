from flask import Blueprint, current_app, g, jsonify, request
from pydantic import ValidationError as PydanticValidationError

from . import i18n
from .auth import require_bearer_token
from .chart_calc import build_birthchart, build_dasha, build_navamsha, build_transits, build_yoga
from .errors import ValidationError
from .logging_utils import sanitize_headers, sanitize_request_data
from .schemas import ChartRequest, DashaRequest, TransitRequest

EPHEMERIS_KEY = "iruastro_ephemeris"

bp = Blueprint("api", __name__)


def _format_errors(exc: PydanticValidationError):
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return messages


def _parse(model):
    """Validate the JSON body against a request model, raising an itemized ValidationError."""
    current_app.logger.info(f"{request.endpoint} request received - Data: {sanitize_request_data(request)}")
    current_app.logger.debug(f"Request Headers: {sanitize_headers(request.headers)}")

    data = request.get_json(silent=True)
    if data is None:
        raise ValidationError(["Request body is missing or is not valid JSON"])
    if isinstance(data, dict) and data.get("language") in i18n.LANGUAGES:
        g.language = data["language"]
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        errors = _format_errors(e)
        current_app.logger.warning(f"Request validation error: {errors}")
        raise ValidationError(errors)


def _ephemeris():
    return current_app.extensions[EPHEMERIS_KEY]


@bp.route("/birthchart", methods=["POST"])
@require_bearer_token
def birthchart():
    payload = _parse(ChartRequest)
    out = build_birthchart(payload, _ephemeris(), current_app.config["DEFAULT_TIMEZONE"])
    current_app.logger.info("Birth chart calculation successful - Response status: 200")
    return jsonify(out), 200


@bp.route("/navamsha", methods=["POST"])
@require_bearer_token
def navamsha():
    payload = _parse(ChartRequest)
    out = build_navamsha(payload, _ephemeris(), current_app.config["DEFAULT_TIMEZONE"])
    current_app.logger.info("Navamsha calculation successful - Response status: 200")
    return jsonify(out), 200


@bp.route("/yoga", methods=["POST"])
@require_bearer_token
def yoga():
    payload = _parse(ChartRequest)
    out = build_yoga(payload, _ephemeris(), current_app.config["DEFAULT_TIMEZONE"])
    current_app.logger.info(f"Yoga calculation successful - {len(out['yogas'])} yogas")
    return jsonify(out), 200


@bp.route("/transit", methods=["POST"])
@require_bearer_token
def transit():
    payload = _parse(TransitRequest)
    out = build_transits(payload, _ephemeris(), current_app.config["TRANSIT_MAX_DAYS"])
    current_app.logger.info(f"Transit calculation successful - {len(out['transits'])} events")
    return jsonify(out), 200


@bp.route("/dasha", methods=["POST"])
@require_bearer_token
def dasha():
    payload = _parse(DashaRequest)
    out = build_dasha(payload, _ephemeris(), current_app.config["DEFAULT_TIMEZONE"])
    current_app.logger.info("Dasha calculation successful - Response status: 200")
    return jsonify(out), 200
