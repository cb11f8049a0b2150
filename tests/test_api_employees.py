import re

import pytest

NUMBER_RE = re.compile(r"^[A-Z]{3}-\d{5}-\d{2}[A-Z]{3}\d{4}$")


def create(client, payload):
    resp = client.post("/api/employees", json=payload)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_create_employee(client, juan_payload):
    body = create(client, juan_payload)
    assert body["id"] >= 1
    assert NUMBER_RE.match(body["employeeNumber"])
    assert body["employeeNumber"].startswith("DEL-")
    assert body["employeeNumber"].endswith("-15MAR1990")
    assert body["firstName"] == "Juan"
    assert body["middleName"] == "Santos"
    assert body["dob"] == "1990-03-15"
    assert body["dailyRate"] == 1000
    assert body["workingDays"] == ["Monday", "Wednesday", "Friday"]
    assert body["workingDayNumbers"] == [1, 3, 5]


def test_create_with_client_field_names(client):
    body = create(client, {
        "firstName": "Ana",
        "lastName": "Reyes",
        "dateOfBirth": "1988-02-29",
        "dailyRate": 1250.5,
        "workingDayNumbers": [1, 2, 3],
    })
    assert body["dateOfBirth"] == "1988-02-29"
    assert body["workingDays"] == ["Monday", "Tuesday", "Wednesday"]
    assert body["middleName"] is None


@pytest.mark.parametrize("missing", ["firstName", "lastName", "dob", "dailyRate", "workingDays"])
def test_create_missing_fields(client, juan_payload, missing):
    payload = {k: v for k, v in juan_payload.items() if k != missing}
    resp = client.post("/api/employees", json=payload)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Missing required fields"}


@pytest.mark.parametrize("override", [
    {"dob": "1990-02-30"},
    {"dailyRate": -1},
    {"dailyRate": "1e30"},
    {"workingDays": ["Funday"]},
    {"workingDays": []},
])
def test_create_rejects_invalid_values(client, juan_payload, override):
    resp = client.post("/api/employees", json={**juan_payload, **override})
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_malformed_json(client):
    resp = client.post("/api/employees", data="{not json", content_type="application/json")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_list_and_get(client, juan_payload):
    create(client, {**juan_payload, "lastName": "Reyes"})
    juan = create(client, juan_payload)

    resp = client.get("/api/employees")
    assert resp.status_code == 200
    assert [e["lastName"] for e in resp.get_json()] == ["Dela Cruz", "Reyes"]

    resp = client.get(f"/api/employees/{juan['id']}")
    assert resp.status_code == 200
    assert resp.get_json()["employeeNumber"] == juan["employeeNumber"]


def test_get_missing(client):
    resp = client.get("/api/employees/999")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Employee not found"}


def test_update_employee(client, juan_payload):
    juan = create(client, juan_payload)
    resp = client.put(f"/api/employees/{juan['id']}", json={
        **juan_payload, "lastName": "Ng", "dailyRate": 1500, "workingDays": ["Tuesday"],
    })
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["id"] == juan["id"]
    assert body["lastName"] == "Ng"
    assert body["employeeNumber"].startswith("NGX-")
    assert body["dailyRate"] == 1500
    assert body["workingDays"] == ["Tuesday"]


def test_update_missing_employee(client, juan_payload):
    resp = client.put("/api/employees/999", json=juan_payload)
    assert resp.status_code == 404


def test_update_requires_fields(client, juan_payload):
    juan = create(client, juan_payload)
    resp = client.put(f"/api/employees/{juan['id']}", json={"firstName": "Juan"})
    assert resp.status_code == 400


def test_delete_employee(client, juan_payload):
    juan = create(client, juan_payload)
    resp = client.delete(f"/api/employees/{juan['id']}")
    assert resp.status_code == 204
    assert client.get(f"/api/employees/{juan['id']}").status_code == 404
    assert client.delete(f"/api/employees/{juan['id']}").status_code == 404


def test_compute_pay(client, juan_payload):
    juan = create(client, juan_payload)
    resp = client.post(f"/api/employees/{juan['id']}/compute-pay",
                       json={"startDate": "2024-03-11", "endDate": "2024-03-17"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["takeHomePay"] == 7000
    assert body["takeHomePayDisplay"] == "7,000.00"
    assert body["breakdown"] == {
        "days": 7,
        "workingDays": 3,
        "birthdays": 1,
        "workingDayPay": 6000,
        "birthdayPay": 1000,
    }


def test_compute_pay_non_working_day(client, juan_payload):
    juan = create(client, juan_payload)
    resp = client.post(f"/api/employees/{juan['id']}/compute-pay",
                       json={"startDate": "2024-03-16", "endDate": "2024-03-16"})
    assert resp.get_json()["takeHomePay"] == 0


def test_compute_pay_requires_dates(client, juan_payload):
    juan = create(client, juan_payload)
    resp = client.post(f"/api/employees/{juan['id']}/compute-pay", json={"startDate": "2024-03-11"})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "startDate and endDate are required"}


def test_compute_pay_end_before_start(client, juan_payload):
    juan = create(client, juan_payload)
    resp = client.post(f"/api/employees/{juan['id']}/compute-pay",
                       json={"startDate": "2024-03-17", "endDate": "2024-03-11"})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "End date must be on or after start date"}


def test_compute_pay_missing_employee(client):
    resp = client.post("/api/employees/999/compute-pay",
                       json={"startDate": "2024-03-11", "endDate": "2024-03-17"})
    assert resp.status_code == 404


def test_storage_failure_is_500(app, client):
    from app.extensions import db

    db.drop_all()
    resp = client.get("/api/employees")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to fetch employees"}


def test_unknown_route_is_json(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_cors_header(client):
    resp = client.get("/api/health")
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
