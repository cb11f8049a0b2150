# app/errors.py
# ---------------------------------
# Error kinds raised by the payroll core and the employee store.
# The HTTP layer maps each one to a JSON body + status code.


class PayrollError(Exception):
    status_code = 500
    default_message = "Unexpected error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class InvalidInput(PayrollError):
    """Malformed date, end-before-start range, bad working days, bad rate."""
    status_code = 400
    default_message = "Invalid input"


class NotFound(PayrollError):
    status_code = 404
    default_message = "Employee not found"


class StorageFailure(PayrollError):
    status_code = 500
    default_message = "Storage unavailable"
