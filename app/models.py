from __future__ import annotations
from datetime import datetime

from .extensions import db
from .services.working_days import parse_working_days, to_weekday_indices


# --------------------------
# Employees
# --------------------------
class Employee(db.Model):
    __tablename__ = "employees"
    __table_args__ = (
        db.Index("ix_employees_last_first", "last_name", "first_name"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    employee_number = db.Column(db.String(32), unique=True, nullable=False)

    first_name = db.Column(db.Text, nullable=False)
    last_name = db.Column(db.Text, nullable=False)
    middle_name = db.Column(db.Text)

    date_of_birth = db.Column(db.Date, nullable=False)  # only month/day matter for pay
    daily_rate = db.Column(db.Numeric(14, 2), nullable=False)
    working_days = db.Column(db.Text, nullable=False)  # "Monday,Wednesday,Friday"

    created_at = db.Column(db.DateTime(timezone=True), default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow
    )

    @property
    def working_day_list(self) -> list[str]:
        return parse_working_days(self.working_days)

    @property
    def working_day_numbers(self) -> list[int]:
        return sorted(to_weekday_indices(self.working_day_list))

    def to_dict(self) -> dict:
        dob = self.date_of_birth.isoformat() if self.date_of_birth else None
        return {
            "id": self.id,
            "employeeNumber": self.employee_number,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "middleName": self.middle_name,
            "dob": dob,
            "dateOfBirth": dob,
            "dailyRate": float(self.daily_rate) if self.daily_rate is not None else None,
            "workingDays": self.working_day_list,
            "workingDayNumbers": self.working_day_numbers,
        }

    def __repr__(self) -> str:
        return f"<Employee {self.id} {self.employee_number}>"
