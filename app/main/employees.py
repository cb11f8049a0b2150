# app/main/employees.py
# ---------------------------------
# Employee CRUD + compute-pay (JSON). Errors are raised as app.errors.*
# and rendered by the handlers registered in create_app().

from flask import jsonify

from ..errors import InvalidInput
from . import main
from .api import get_store, json_body, money_payload


@main.route("/api/employees", methods=["GET"], endpoint="employees_list")
def employees_list():
    return jsonify([e.to_dict() for e in get_store().list_all()])


@main.route("/api/employees/<int:eid>", methods=["GET"], endpoint="employees_get")
def employees_get(eid):
    return jsonify(get_store().get(eid).to_dict())


@main.route("/api/employees", methods=["POST"], endpoint="employees_create")
def employees_create():
    emp = get_store().create(json_body())
    return jsonify(emp.to_dict()), 201


@main.route("/api/employees/<int:eid>", methods=["PUT"], endpoint="employees_update")
def employees_update(eid):
    emp = get_store().update(eid, json_body())
    return jsonify(emp.to_dict())


@main.route("/api/employees/<int:eid>", methods=["DELETE"], endpoint="employees_delete")
def employees_delete(eid):
    get_store().delete(eid)
    return "", 204


@main.route("/api/employees/<int:eid>/compute-pay", methods=["POST"], endpoint="employees_compute_pay")
def employees_compute_pay(eid):
    body = json_body()
    start, end = body.get("startDate"), body.get("endDate")
    if not start or not end:
        raise InvalidInput("startDate and endDate are required")

    result = get_store().compute_pay(eid, start, end)
    b = result["breakdown"]
    total = money_payload(result["takeHomePay"])
    return jsonify(
        takeHomePay=total["amount"],
        takeHomePayDisplay=total["display"],
        employeeNumber=result["employee"].employee_number,
        startDate=b["start_date"].isoformat(),
        endDate=b["end_date"].isoformat(),
        breakdown={
            "days": b["days"],
            "workingDays": b["working_days"],
            "birthdays": b["birthdays"],
            "workingDayPay": float(b["working_day_pay"]),
            "birthdayPay": float(b["birthday_pay"]),
        },
    )
