# app/services/employee_number.py
from __future__ import annotations

import random
import re

from ..errors import InvalidInput
from ..utils.helpers import parse_date

MONTH_CODES = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN",
               "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")

_NON_ALPHA = re.compile(r"[^A-Za-z]")
RANDOM_SPACE = 100_000  # five digits


def name_prefix(last_name: str | None) -> str:
    clean = _NON_ALPHA.sub("", last_name or "").upper()
    return (clean[:3] or "EMP").ljust(3, "X")


def generate_employee_number(last_name: str | None, date_of_birth, rng: random.Random | None = None) -> str:
    """
    Build "{PFX}-{NNNNN}-{DDMONYYYY}", e.g. DEL-04821-15MAR1990.
    Raises InvalidInput when date_of_birth is not a calendar date.
    """
    dob = parse_date(date_of_birth, field="date of birth")
    draw = (rng or random).randrange(RANDOM_SPACE)
    return f"{name_prefix(last_name)}-{draw:05d}-{dob.day:02d}{MONTH_CODES[dob.month - 1]}{dob.year:04d}"
