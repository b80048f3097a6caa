"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict, List

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from journey.config import Settings
from journey.constants import MILESTONES
from journey.core.currency import FALLBACK_RATES, convert_currency, exchange_rate
from journey.core.holdings import net_worth_by_currency
from journey.core.ping import get_ping_message, get_version
from journey.core.projection import milestone_ladder, project_contribution, projection_timeline
from journey.core.timevalue import years_to_target
from journey.models import Account
from journey.schemas.currency import (
    ConversionRequest,
    ConversionResponse,
    NetWorthRequest,
    NetWorthResponse,
)
from journey.schemas.milestones import MilestoneRequest, MilestoneResponse
from journey.schemas.ping import PingResponse
from journey.schemas.projection import (
    ProjectionRequest,
    TimelineRequest,
    TimelineResponse,
    YearsToTargetRequest,
    YearsToTargetResponse,
)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _active(accounts: List[Account]) -> List[Account]:
    return [account for account in accounts if account.is_active]


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message(), version=get_version())
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Dashboard numbers: gap to the goal and the monthly amount that closes it."""
    payload = ProjectionRequest.model_validate(_payload())
    settings = _settings()

    result = project_contribution(
        _active(payload.accounts),
        target_amount=(
            payload.targetAmount if payload.targetAmount is not None else settings.target_amount_usd
        ),
        target_date=payload.targetDate or settings.target_date,
        default_growth_rate=(
            payload.defaultGrowthRate
            if payload.defaultGrowthRate is not None
            else settings.default_growth_rate
        ),
        rates=payload.rates,
        now=payload.now,
        on_track_ratio=settings.on_track_ratio,
    )
    return jsonify(result.model_dump(mode="json", by_alias=True))


@api_bp.post("/projection/timeline")
def timeline() -> Any:
    payload = TimelineRequest.model_validate(_payload())
    settings = _settings()

    points = projection_timeline(
        _active(payload.accounts),
        payload.monthlyContribution,
        years=payload.years,
        investment_rate=(
            payload.investmentRate
            if payload.investmentRate is not None
            else settings.default_growth_rate
        ),
        rates=payload.rates,
        now=payload.now,
    )
    response = TimelineResponse(points=points)
    return jsonify(response.model_dump(mode="json", by_alias=True))


@api_bp.post("/projection/years-to-target")
def years_to_goal() -> Any:
    payload = YearsToTargetRequest.model_validate(_payload())
    settings = _settings()

    years = years_to_target(
        payload.currentAmount,
        payload.monthlyContribution,
        payload.targetAmount if payload.targetAmount is not None else settings.target_amount_usd,
        payload.annualRate if payload.annualRate is not None else settings.default_growth_rate,
    )
    response = YearsToTargetResponse(years=years, reachable=years is not None)
    return jsonify(response.model_dump())


@api_bp.post("/milestones")
def milestones() -> Any:
    payload = MilestoneRequest.model_validate(_payload())
    ladder = milestone_ladder(payload.currentAmount, payload.milestones or MILESTONES)
    response = MilestoneResponse(milestones=ladder)
    return jsonify(response.model_dump(mode="json", by_alias=True))


@api_bp.post("/net-worth")
def net_worth() -> Any:
    payload = NetWorthRequest.model_validate(_payload())
    totals = net_worth_by_currency(_active(payload.accounts), payload.rates)
    return jsonify(NetWorthResponse(totals=totals).model_dump(mode="json"))


@api_bp.post("/currency/convert")
def convert() -> Any:
    payload = ConversionRequest.model_validate(_payload())
    response = ConversionResponse(
        amount=convert_currency(payload.amount, payload.source, payload.target, payload.rates),
        rate=exchange_rate(payload.source, payload.target, payload.rates),
    )
    return jsonify(response.model_dump())


@api_bp.get("/currency/fallback-rates")
def fallback_rates() -> Any:
    """The hardcoded last-resort snapshot, for clients with no live rates."""
    return jsonify(dict(FALLBACK_RATES))
