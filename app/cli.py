# app/cli.py
import click
from flask import current_app

from .errors import PayrollError
from .utils.helpers import fmt_money

SAMPLE_EMPLOYEES = [
    dict(firstName="Juan", lastName="Dela Cruz", middleName="Santos", dob="1990-03-15",
         dailyRate="1000.00", workingDays=["Monday", "Wednesday", "Friday"]),
    dict(firstName="Maria", lastName="Reyes", dob="1988-02-29",
         dailyRate="1250.50", workingDays=["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]),
    dict(firstName="Jose", lastName="O'Neil", dob="1995-12-01",
         dailyRate="800.00", workingDays=["Saturday", "Sunday"]),
]


def register_cli(app):
    @app.cli.command("seed-min")
    def seed_min():
        """Dev-only: insert a few sample employees when the table is empty."""
        store = current_app.extensions["employee_store"]
        if store.list_all():
            click.echo("Employees already present; nothing to seed.")
            return
        for fields in SAMPLE_EMPLOYEES:
            emp = store.create(fields)
            click.echo(f"  {emp.employee_number}  {emp.last_name}, {emp.first_name}")
        click.echo(f"✅ Seeded {len(SAMPLE_EMPLOYEES)} employees.")

    @app.cli.command("compute-pay")
    @click.argument("employee_id", type=int)
    @click.argument("start_date")
    @click.argument("end_date")
    def compute_pay(employee_id, start_date, end_date):
        """Print take-home pay for EMPLOYEE_ID over START_DATE..END_DATE (inclusive)."""
        store = current_app.extensions["employee_store"]
        try:
            result = store.compute_pay(employee_id, start_date, end_date)
        except PayrollError as e:
            raise click.ClickException(e.message)
        b = result["breakdown"]
        click.echo(
            f"{result['employee'].employee_number}: {fmt_money(result['takeHomePay'])} "
            f"({b['working_days']} working day(s), {b['birthdays']} birthday(s), {b['days']} day(s))"
        )
