# app/services/payroll.py
from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal

from ..errors import InvalidInput
from ..utils.helpers import parse_amount, parse_date
from .working_days import parse_working_days, python_weekday_to_index, to_weekday_indices

logger = logging.getLogger(__name__)

WORKING_DAY_MULTIPLIER = Decimal("2")


def _working_days_of(employee) -> list[str]:
    labels = getattr(employee, "working_day_list", None)
    if labels is None:
        labels = getattr(employee, "working_days", None) or []
    if isinstance(labels, str):
        return parse_working_days(labels)
    return list(labels)


def calc_pay_breakdown(employee, start_date, end_date) -> dict:
    """
    Walk every calendar day in [start_date, end_date]:
    - working day  -> +2 x daily rate
    - birthday     -> +1 x daily rate (month/day match, year ignored)
    Both can apply on the same day.
    """
    start = parse_date(start_date, field="start date")
    end = parse_date(end_date, field="end date")
    if end < start:
        raise InvalidInput("End date must be on or after start date")

    dob = parse_date(employee.date_of_birth, field="employee date of birth")
    rate = parse_amount(employee.daily_rate, field="daily rate")

    # derived once, not per day
    weekdays = to_weekday_indices(_working_days_of(employee))
    birthday = (dob.month, dob.day)

    days = working = birthdays = 0
    # date.max has no successor, so index days by offset
    for offset in range((end - start).days + 1):
        d: date = start + timedelta(days=offset)
        days += 1
        if python_weekday_to_index(d) in weekdays:
            working += 1
        if (d.month, d.day) == birthday:
            birthdays += 1

    working_day_pay = WORKING_DAY_MULTIPLIER * rate * working
    birthday_pay = rate * birthdays
    total = working_day_pay + birthday_pay

    logger.debug(
        f"[payroll] {start}..{end} days={days} working={working} birthdays={birthdays} total={total}"
    )
    return {
        "start_date": start,
        "end_date": end,
        "days": days,
        "working_days": working,
        "birthdays": birthdays,
        "working_day_pay": working_day_pay,
        "birthday_pay": birthday_pay,
        "total": total,
    }


def compute_take_home_pay(employee, start_date, end_date) -> Decimal:
    return calc_pay_breakdown(employee, start_date, end_date)["total"]
