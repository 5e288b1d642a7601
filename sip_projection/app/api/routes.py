"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict, List

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError

from sip_projection.core.formulas import estimate_sip
from sip_projection.core.metrics import yearly_summaries
from sip_projection.core.ping import get_ping_response
from sip_projection.core.projection import project
from sip_projection.exporters import export_monthly, export_yearly
from sip_projection.models import PlanConfiguration
from sip_projection.schemas.formulas import SipEstimateRequest
from sip_projection.schemas.projection import ProjectionResponse, SimulationResult, YearlySummary

api_bp = Blueprint("api", __name__)

VIEWS = ("monthly", "yearly")


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Reject malformed request bodies with a 400 listing the offending fields."""
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.BAD_REQUEST


def _read_plan() -> PlanConfiguration:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return PlanConfiguration.model_validate(raw_payload)


def _yearly(result: SimulationResult) -> List[YearlySummary]:
    return yearly_summaries(result.projections, initial_investment=result.initialInvestment)


def _requested_view(default: str) -> str:
    return request.args.get("view", default)


def _bad_view(view: str):
    return jsonify({"detail": f"unknown view {view!r}; expected one of {', '.join(VIEWS)}"}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(get_ping_response().model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Project a plan and return the ledger, yearly view and final metrics."""
    view = _requested_view("monthly")
    if view not in VIEWS:
        return _bad_view(view)

    result = project(_read_plan())
    response = ProjectionResponse(
        projections=result.projections if view == "monthly" else [],
        yearly=_yearly(result),
        finalMetrics=result.finalMetrics,
        warnings=result.warnings,
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/projection/export")
def export_projection() -> Any:
    """Project a plan and return it as a CSV attachment."""
    view = _requested_view(current_app.config["DEFAULT_EXPORT_VIEW"])
    if view not in VIEWS:
        return _bad_view(view)

    result = project(_read_plan())
    if view == "yearly":
        filename, body = export_yearly(_yearly(result))
    else:
        filename, body = export_monthly(result.projections)

    return Response(
        body,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@api_bp.post("/formulas/sip")
def sip_formula() -> Any:
    """Closed-form SIP maturity estimate."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = SipEstimateRequest.model_validate(raw_payload)
    return jsonify(estimate_sip(payload).model_dump())
