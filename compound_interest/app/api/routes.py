"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from compound_interest.core.accumulation import run_accumulation_scenario
from compound_interest.core.compound import run_compound_scenario
from compound_interest.core.config import Settings
from compound_interest.core.errors import HistoryItemNotFound, InvalidInputError
from compound_interest.core.history import HistoryStore
from compound_interest.schemas.calculation import AccumulationRequest, CompoundRequest
from compound_interest.schemas.history import (
    HealthResponse,
    HistoryListResponse,
    SaveHistoryRequest,
)

api_bp = Blueprint("api", __name__)


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _history() -> HistoryStore:
    return current_app.extensions["history_store"]


def _with_defaults(raw_payload: Dict[str, Any]) -> Dict[str, Any]:
    """Fill tax and FX rates the client left out from the configured defaults."""
    settings = _settings()
    payload = dict(raw_payload)
    payload.setdefault("tax_rate", settings.default_tax_rate)
    fx = payload.get("fx")
    if isinstance(fx, dict):
        fx = dict(fx)
        fx.setdefault("rate_in", settings.default_fx_rate)
        fx.setdefault("rate_out", settings.default_fx_rate)
        payload["fx"] = fx
    return payload


def _model_response(model: BaseModel, status: HTTPStatus = HTTPStatus.OK):
    """Serialise with pydantic so non-finite floats become null, not bare NaN."""
    return current_app.response_class(
        model.model_dump_json(), status=status, mimetype="application/json"
    )


def _json_body() -> Dict[str, Any]:
    raw_payload = request.get_json(force=True, silent=False)
    if not isinstance(raw_payload, dict):
        raise InvalidInputError(["request body must be a JSON object"])
    return raw_payload


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InvalidInputError)
def _handle_invalid_input(exc: InvalidInputError):
    return jsonify({"detail": exc.errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(HistoryItemNotFound)
def _handle_missing_history_item(exc: HistoryItemNotFound):
    return jsonify({"detail": f"history item {exc.item_id} not found"}), HTTPStatus.NOT_FOUND


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(status="ok", app=_settings().app_name)
    return jsonify(response.model_dump())


@api_bp.post("/calc/compound")
def compound() -> Any:
    """Lump-sum growth, with the end-of-term tax when ``include_tax`` is set."""
    payload = CompoundRequest.model_validate(_with_defaults(_json_body()))
    result = run_compound_scenario(payload)
    return _model_response(result)


@api_bp.post("/calc/accumulation")
def accumulation() -> Any:
    """Monthly contributions taxed every compounding period."""
    payload = AccumulationRequest.model_validate(_with_defaults(_json_body()))
    result = run_accumulation_scenario(payload)
    return _model_response(result)


@api_bp.get("/history")
def list_history() -> Any:
    items = _history().list()
    response = HistoryListResponse(items=items, count=len(items))
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/history")
def save_history() -> Any:
    payload = SaveHistoryRequest.model_validate(_json_body())
    item = _history().save(
        payload.kind,
        payload.state,
        payload.result,
        name=payload.name,
    )
    return jsonify(item.model_dump(mode="json")), HTTPStatus.CREATED


@api_bp.get("/history/<item_id>")
def get_history_item(item_id: str) -> Any:
    return jsonify(_history().get(item_id).model_dump(mode="json"))


@api_bp.delete("/history/<item_id>")
def delete_history_item(item_id: str) -> Any:
    if not _history().delete(item_id):
        raise HistoryItemNotFound(item_id)
    return "", HTTPStatus.NO_CONTENT
