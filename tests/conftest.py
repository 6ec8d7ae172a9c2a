import pytest

from carloan import LoanTerms, loan_state_at
from carloan.config import Settings


@pytest.fixture
def car_loan():
    """Rs 8,00,000 at 8% for 3 years."""
    return LoanTerms(principal=800_000, annual_rate=8, tenure_months=36)


@pytest.fixture
def state(car_loan):
    return loan_state_at(car_loan)


@pytest.fixture
def settings():
    return Settings()
