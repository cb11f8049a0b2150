# app/main/api.py
from flask import current_app, jsonify, request

from ..errors import InvalidInput
from ..services.employees import EmployeeStore
from ..utils.helpers import fmt_money
from . import main


def get_store() -> EmployeeStore:
    return current_app.extensions["employee_store"]


def json_body() -> dict:
    """Request JSON as a dict; empty body -> {}."""
    data = request.get_json(silent=True)
    if data is None:
        if request.get_data(cache=True).strip():
            raise InvalidInput("Request body must be valid JSON")
        return {}
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")
    return data


def money_payload(amount) -> dict:
    return {"amount": float(amount), "display": fmt_money(amount)}


@main.route("/api/health", methods=["GET"])
def api_health():
    return jsonify(status="ok")
