import pytest

from carloan import LoanState, remaining_interest, total_interest


def test_remaining_interest():
    state = LoanState(principal=100_000, monthly_emi=9_000, monthly_rate=0.01, remaining_tenure=12)
    assert remaining_interest(state) == 8_000


def test_total_interest():
    assert total_interest(100_000, 9_000, 12) == 8_000


def test_remaining_interest_of_opening_state_is_total_interest(state):
    assert remaining_interest(state) == pytest.approx(
        total_interest(800_000, state.monthly_emi, 36)
    )
