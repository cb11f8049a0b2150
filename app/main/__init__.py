# app/main/__init__.py
# ---------------------------------
# Single blueprint named `main` for the JSON API.
# Import the route modules at the bottom so their routes register.

from flask import Blueprint

main = Blueprint("main", __name__)

# Route modules (keep these imports at the end)
from . import api, employees  # noqa: E402,F401
