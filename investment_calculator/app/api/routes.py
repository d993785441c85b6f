"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from babel.core import UnknownLocaleError
from babel.numbers import UnknownCurrencyError
from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from investment_calculator import __version__
from investment_calculator.app.state import get_state
from investment_calculator.core.analytics import adjust_for_inflation, calculate_cagr
from investment_calculator.core.formatting import CurrencyFormatter
from investment_calculator.core.projection import (
    InvalidInputError,
    calculate_investment_results,
    compare_scenarios,
)
from investment_calculator.core.validation import validate_investment_input
from investment_calculator.core.views import calculate_portfolio_breakdown, convert_to_chart_data
from investment_calculator.domain.scenarios import ScenarioNotFoundError
from investment_calculator.domain.templates import TemplateNotFoundError, get_template, list_templates
from investment_calculator.models import InvestmentInput
from investment_calculator.schemas.investment import (
    CagrRequest,
    CompareRequest,
    FormatRequest,
    FormatResponse,
    FormattedSummary,
    InflationRequest,
    ProjectionResponse,
    SaveScenarioRequest,
    ThemeUpdateRequest,
    UpdateScenarioRequest,
)
from investment_calculator.schemas.ping import PingResponse

api_bp = Blueprint("api", __name__)


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidInputError)
def _handle_invalid_input(exc: InvalidInputError):
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ValueError)
def _handle_value_error(exc: ValueError):
    return jsonify({"error": [str(exc)]}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ScenarioNotFoundError)
@api_bp.errorhandler(TemplateNotFoundError)
def _handle_not_found(exc: KeyError):
    return jsonify({"error": [str(exc)]}), HTTPStatus.NOT_FOUND


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.post("/investment/validate")
def validate() -> Any:
    payload = InvestmentInput.model_validate(_payload())
    return jsonify(validate_investment_input(payload).model_dump())


@api_bp.post("/investment/project")
def project() -> Any:
    """Projection plus the chart, breakdown and display strings built from it."""
    payload = InvestmentInput.model_validate(_payload())
    state = get_state()

    results = calculate_investment_results(payload)
    theme = state.theme.theme
    fmt = state.formatter
    summary = results.summary

    response = ProjectionResponse(
        results=results,
        chartData=convert_to_chart_data(results),
        portfolioBreakdown=calculate_portfolio_breakdown(
            results,
            invested_color=theme.primaryColor,
            interest_color=theme.accentColor,
        ),
        formatted=FormattedSummary(
            totalInvested=fmt.format(summary.totalInvested),
            totalInterest=fmt.format(summary.totalInterest),
            finalValue=fmt.format(summary.finalValue),
            finalValueCompact=fmt.format_compact(summary.finalValue),
        ),
    )
    return jsonify(response.model_dump())


@api_bp.post("/investment/compare")
def compare() -> Any:
    payload = CompareRequest.model_validate(_payload())
    results = [calculate_investment_results(item) for item in payload.inputs]
    return jsonify(compare_scenarios(results).model_dump())


@api_bp.post("/analytics/cagr")
def cagr() -> Any:
    payload = CagrRequest.model_validate(_payload())
    value = calculate_cagr(payload.initialValue, payload.finalValue, payload.years)
    return jsonify({"cagr": value})


@api_bp.post("/analytics/inflation")
def inflation() -> Any:
    payload = InflationRequest.model_validate(_payload())
    try:
        value = adjust_for_inflation(payload.presentValue, payload.inflationRate, payload.years)
    except ZeroDivisionError:
        return jsonify({"error": ["inflation rate of -100% is undefined"]}), HTTPStatus.BAD_REQUEST
    return jsonify({"adjustedValue": value})


@api_bp.post("/format")
def format_value() -> Any:
    payload = FormatRequest.model_validate(_payload())
    state = get_state()
    if payload.locale is None and payload.currency is None:
        fmt = state.formatter
    else:
        try:
            fmt = CurrencyFormatter(
                payload.locale or state.settings.locale,
                payload.currency or state.settings.currency,
            )
        except (UnknownLocaleError, UnknownCurrencyError) as exc:
            return jsonify({"error": [str(exc)]}), HTTPStatus.BAD_REQUEST

    response = FormatResponse(
        formatted=fmt.format(payload.value),
        compact=fmt.format_compact(payload.value),
    )
    return jsonify(response.model_dump())


@api_bp.get("/templates")
def templates() -> Any:
    return jsonify([t.model_dump() for t in list_templates()])


@api_bp.get("/templates/<template_id>")
def template(template_id: str) -> Any:
    return jsonify(get_template(template_id).model_dump())


@api_bp.get("/scenarios")
def scenarios() -> Any:
    store = get_state().scenarios
    return jsonify([s.model_dump(mode="json") for s in store.list_scenarios()])


@api_bp.post("/scenarios")
def save_scenario() -> Any:
    payload = SaveScenarioRequest.model_validate(_payload())
    scenario = get_state().scenarios.save_scenario(payload.name, payload.input)
    return jsonify(scenario.model_dump(mode="json")), HTTPStatus.CREATED


@api_bp.delete("/scenarios")
def clear_scenarios() -> Any:
    get_state().scenarios.clear_all_scenarios()
    return "", HTTPStatus.NO_CONTENT


@api_bp.get("/scenarios/<scenario_id>")
def get_scenario(scenario_id: str) -> Any:
    return jsonify(get_state().scenarios.get_scenario(scenario_id).model_dump(mode="json"))


@api_bp.get("/scenarios/<scenario_id>/input")
def load_scenario(scenario_id: str) -> Any:
    """Input fields to seed the form with when a saved scenario is reopened."""
    return jsonify(get_state().scenarios.load_scenario(scenario_id).model_dump())


@api_bp.put("/scenarios/<scenario_id>")
def update_scenario(scenario_id: str) -> Any:
    payload = UpdateScenarioRequest.model_validate(_payload())
    scenario = get_state().scenarios.update_scenario(scenario_id, payload.input, name=payload.name)
    return jsonify(scenario.model_dump(mode="json"))


@api_bp.delete("/scenarios/<scenario_id>")
def delete_scenario(scenario_id: str) -> Any:
    get_state().scenarios.delete_scenario(scenario_id)
    return "", HTTPStatus.NO_CONTENT


@api_bp.get("/theme")
def theme() -> Any:
    return jsonify(get_state().theme.theme.model_dump())


@api_bp.put("/theme")
def update_theme() -> Any:
    payload = ThemeUpdateRequest.model_validate(_payload())
    updated = get_state().theme.update_theme(
        mode=payload.mode,
        primary_color=payload.primaryColor,
        accent_color=payload.accentColor,
    )
    return jsonify(updated.model_dump())


@api_bp.post("/theme/toggle")
def toggle_theme() -> Any:
    return jsonify(get_state().theme.toggle_theme().model_dump())
