import pytest

from app import create_app
from app.config import Testing
from app.extensions import db


class SeqRng:
    """Stand-in for random.Random that replays fixed draws."""

    def __init__(self, values):
        self.values = iter(values)

    def randrange(self, n):
        return next(self.values)


@pytest.fixture
def app():
    app = create_app(Testing)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["employee_store"]


@pytest.fixture
def juan_payload():
    return {
        "firstName": "Juan",
        "lastName": "Dela Cruz",
        "middleName": "Santos",
        "dob": "1990-03-15",
        "dailyRate": 1000,
        "workingDays": ["Monday", "Wednesday", "Friday"],
    }


@pytest.fixture
def seq_rng():
    return SeqRng
