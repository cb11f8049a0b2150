# app/services/employees.py
# ---------------------------------
# EmployeeStore: create / read / update / delete employees and compute pay.
# Created once by create_app() and kept in app.extensions["employee_store"].
#
# Notes:
# - Writes go through one lock per store so the employee_number check and
#   the INSERT/UPDATE are not interleaved inside this process.
# - The UNIQUE constraint on employee_number covers other processes:
#   an IntegrityError is retried with a new draw when, after rollback, the
#   number is held by another row. Any other IntegrityError is a StorageFailure.
from __future__ import annotations

import logging
import random
import threading
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import InvalidInput, NotFound, StorageFailure
from ..extensions import db
from ..models import Employee
from ..utils.helpers import parse_amount, parse_date
from .employee_number import generate_employee_number
from .payroll import calc_pay_breakdown
from .working_days import from_weekday_indices, normalize_working_days, serialize_working_days

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
MAX_DAILY_RATE = Decimal("999999999999.99")  # 12 integer digits


# ---------------------------
# Input validation
# ---------------------------
def _text(v) -> str:
    return v.strip() if isinstance(v, str) else ""


def clean_employee_fields(fields: dict | None) -> dict:
    """
    Validate request fields and return column values.
    Accepts dob/dateOfBirth and workingDays/workingDayNumbers.
    """
    fields = fields or {}
    first = _text(fields.get("firstName"))
    last = _text(fields.get("lastName"))
    dob_raw = fields.get("dob", fields.get("dateOfBirth"))
    rate_raw = fields.get("dailyRate")

    if "workingDays" in fields and fields.get("workingDays") is not None:
        days_raw = fields.get("workingDays")
        from_numbers = False
    else:
        days_raw = fields.get("workingDayNumbers")
        from_numbers = True

    if not first or not last or not dob_raw or rate_raw is None or not days_raw:
        raise InvalidInput("Missing required fields")
    if not isinstance(days_raw, (list, tuple)):
        raise InvalidInput("Working days must be a list")

    labels = from_weekday_indices(days_raw) if from_numbers else days_raw

    return {
        "first_name": first,
        "last_name": last,
        "middle_name": _text(fields.get("middleName")) or None,
        "date_of_birth": parse_date(dob_raw, field="date of birth"),
        "daily_rate": clean_daily_rate(rate_raw),
        "working_days": serialize_working_days(normalize_working_days(labels)),
    }


def clean_daily_rate(v) -> Decimal:
    """Two-decimal rate that fits employees.daily_rate (Numeric(14, 2))."""
    try:
        rate = parse_amount(v, field="daily rate").quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidInput(f"Invalid daily rate: {v!r}")
    if rate > MAX_DAILY_RATE:
        raise InvalidInput(f"Invalid daily rate: {v!r}")
    return rate


# ---------------------------
# Store
# ---------------------------
class EmployeeStore:
    def __init__(self, session=None, max_attempts: int = 5,
                 regenerate_on_update: bool = True, rng: random.Random | None = None):
        self.session = session if session is not None else db.session
        self.max_attempts = max(1, int(max_attempts))
        self.regenerate_on_update = regenerate_on_update
        self.rng = rng
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config) -> "EmployeeStore":
        return cls(
            max_attempts=config.get("EMPLOYEE_NUMBER_MAX_ATTEMPTS", 5),
            regenerate_on_update=config.get("REGENERATE_EMPLOYEE_NUMBER_ON_UPDATE", True),
        )

    # --- reads ---
    def list_all(self) -> list[Employee]:
        try:
            return list(
                self.session.execute(
                    select(Employee).order_by(Employee.last_name, Employee.first_name, Employee.id)
                ).scalars()
            )
        except SQLAlchemyError as e:
            raise self._storage_failure("fetch employees", e)

    def get(self, employee_id: int) -> Employee:
        try:
            emp = self.session.get(Employee, employee_id)
        except SQLAlchemyError as e:
            raise self._storage_failure("fetch employee", e)
        if emp is None:
            raise NotFound()
        return emp

    def number_taken(self, number: str, exclude_id: int | None = None) -> bool:
        q = select(Employee.id).where(Employee.employee_number == number)
        if exclude_id is not None:
            q = q.where(Employee.id != exclude_id)
        return self.session.execute(q).first() is not None

    # --- writes ---
    def create(self, fields: dict) -> Employee:
        values = clean_employee_fields(fields)
        with self._lock:
            emp = self._save_with_new_number(lambda: Employee(**values), values, "create employee")
        logger.info(f"[employees] created id={emp.id} number={emp.employee_number}")
        return emp

    def update(self, employee_id: int, fields: dict) -> Employee:
        values = clean_employee_fields(fields)

        def _load_and_apply():
            emp = self.get(employee_id)
            for k, v in values.items():
                setattr(emp, k, v)
            return emp

        with self._lock:
            if self.regenerate_on_update:
                emp = self._save_with_new_number(_load_and_apply, values, "update employee")
            else:
                emp = _load_and_apply()
                self._commit("update employee")
        logger.info(f"[employees] updated id={emp.id} number={emp.employee_number}")
        return emp

    def delete(self, employee_id: int) -> None:
        with self._lock:
            emp = self.get(employee_id)
            self.session.delete(emp)
            self._commit("delete employee")
        logger.info(f"[employees] deleted id={employee_id}")

    # --- payroll ---
    def compute_pay(self, employee_id: int, start_date, end_date) -> dict:
        emp = self.get(employee_id)
        breakdown = calc_pay_breakdown(emp, start_date, end_date)
        return {"employee": emp, "takeHomePay": breakdown["total"], "breakdown": breakdown}

    # --- internals ---
    def _save_with_new_number(self, build, values: dict, action: str) -> Employee:
        """
        build() returns the (new or loaded) Employee with values applied.
        Draw numbers until one is free and the commit succeeds.
        """
        for attempt in range(1, self.max_attempts + 1):
            emp = build()
            emp_id = emp.id
            number = generate_employee_number(values["last_name"], values["date_of_birth"], rng=self.rng)
            try:
                if self.number_taken(number, exclude_id=emp_id):
                    logger.warning(f"[employees] number collision {number} (attempt {attempt})")
                    continue
                emp.employee_number = number
                self.session.add(emp)
                self.session.commit()
                return emp
            except IntegrityError as e:
                self.session.rollback()
                # only a row that now holds this number counts as a collision
                try:
                    taken = self.number_taken(number, exclude_id=emp_id)
                except SQLAlchemyError as e2:
                    raise self._storage_failure(action, e2)
                if not taken:
                    raise self._storage_failure(action, e)
                logger.warning(f"[employees] unique violation for {number} (attempt {attempt})")
            except SQLAlchemyError as e:
                raise self._storage_failure(action, e)

        self.session.rollback()
        raise StorageFailure("Could not allocate a unique employee number")

    def _commit(self, action: str) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._storage_failure(action, e)

    def _storage_failure(self, action: str, e: Exception) -> StorageFailure:
        logger.error(f"[employees] {action} failed: {e}")
        self.session.rollback()
        return StorageFailure(f"Failed to {action}")
