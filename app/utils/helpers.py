from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from ..errors import InvalidInput


def parse_date(v, field: str = "date") -> date:
    """
    Accepts a date, a datetime or an ISO string ("2024-03-15" or
    "2024-03-15T00:00:00Z"). Raises InvalidInput otherwise.
    """
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    if not isinstance(v, str) or not v.strip():
        raise InvalidInput(f"Invalid {field}: {v!r}")

    s = v.strip()
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        raise InvalidInput(f"Invalid {field}: {v!r}")


def parse_amount(v, field: str = "amount") -> Decimal:
    """Non-negative Decimal from a number or numeric string."""
    if v is None or isinstance(v, bool):
        raise InvalidInput(f"Invalid {field}: {v!r}")
    try:
        amount = Decimal(str(v).replace(",", "").strip())
    except (InvalidOperation, AttributeError):
        raise InvalidInput(f"Invalid {field}: {v!r}")
    if not amount.is_finite() or amount < 0:
        raise InvalidInput(f"Invalid {field}: {v!r}")
    return amount


def fmt_money(value) -> str:
    """Two decimals with thousands separators; display only."""
    try:
        return "{:,.2f}".format(Decimal(str(value)))
    except (InvalidOperation, ValueError, TypeError):
        return str(value)
