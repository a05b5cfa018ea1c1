import pytest
from datetime import datetime
import pytz
from fastapi.testclient import TestClient
from equipment_loans.main import app
from equipment_loans.models import Loan, LoanStatus
from equipment_loans.schemas import UserCreate, MaterialCreate
from equipment_loans.services.tracker import LoanTracker
from equipment_loans.state import get_tracker


def utc(*args):
    """Aware UTC datetime from datetime() positional arguments."""
    return pytz.utc.localize(datetime(*args))


class FixedClock:
    """Clock whose time only moves when a test sets it."""

    def __init__(self, moment):
        self.moment = moment

    def __call__(self):
        return self.moment


def make_loan(loan_id="loan-1", material_id="mat-1", user_id="user-1",
              borrow_date=None, expected=None, returned_at=None):
    return Loan(
        id=loan_id,
        user_id=user_id,
        material_id=material_id,
        borrow_date=borrow_date or utc(2024, 1, 1, 9),
        expected_return_date=expected,
        actual_return_date=returned_at,
        status=LoanStatus.RETURNED if returned_at else LoanStatus.ACTIVE,
    )


@pytest.fixture
def clock():
    return FixedClock(utc(2024, 1, 1, 9))


@pytest.fixture
def tracker(clock):
    """Fresh tracker on an empty store, 2024-01-01 09:00 UTC."""
    return LoanTracker(clock=clock)


@pytest.fixture
def sample_user(tracker):
    return tracker.add_user(UserCreate(first_name="Bruno", last_name="Martin"))


@pytest.fixture
def sample_material(tracker):
    return tracker.add_material(MaterialCreate(name="MacBook Pro", category="Laptop"))


@pytest.fixture
def client(tracker):
    """Test client wired to the fixture tracker instead of the global one."""
    app.dependency_overrides[get_tracker] = lambda: tracker
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
