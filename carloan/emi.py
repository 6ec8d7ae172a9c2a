"""
EMI formula and closed-form balance helpers.

EMI = P × r × (1+r)^n / ((1+r)^n - 1)

Where:
    P = principal
    r = monthly interest rate (annual_rate / 12 / 100)
    n = tenure in months

No rounding happens here; amounts are rounded only when they are displayed.
"""

import logging

from .exceptions import InvalidLoanInputs
from .models import LoanState, LoanTerms

logger = logging.getLogger(__name__)


def monthly_rate(annual_rate):
    return annual_rate / (12 * 100)


def annuity_payment(principal, rate, months):
    """
    Payment that amortizes ``principal`` over ``months`` at monthly ``rate``.

    A zero rate spreads the principal evenly.
    """
    if rate == 0:
        return principal / months
    # negative exponent underflows to 0 for very long tenures instead of overflowing
    return principal * rate / (1 - (1 + rate) ** -months)


def compute_emi(principal, annual_rate, tenure_months, *, strict=False):
    """
    Monthly installment for a loan.

    Non-positive principal, rate or tenure mean a partially filled form: the
    result is 0.0, or ``InvalidLoanInputs`` is raised when ``strict`` is set.
    """
    if principal <= 0 or annual_rate <= 0 or tenure_months <= 0:
        if strict:
            raise InvalidLoanInputs(
                "Principal, interest rate and tenure must all be greater than 0 "
                f"(got principal={principal}, rate={annual_rate}, tenure={tenure_months})."
            )
        return 0.0

    return annuity_payment(principal, monthly_rate(annual_rate), tenure_months)


def emi_for_years(principal, annual_rate, tenure_years, *, strict=False):
    return compute_emi(principal, annual_rate, tenure_years * 12, strict=strict)


def outstanding_balance(principal, annual_rate, tenure_months, months_paid):
    """
    Balance left after ``months_paid`` regular installments.

    B_k = P(1+r)^k - EMI((1+r)^k - 1) / r
    """
    if months_paid <= 0:
        return float(principal)
    if months_paid >= tenure_months:
        return 0.0

    emi = compute_emi(principal, annual_rate, tenure_months, strict=True)
    r = monthly_rate(annual_rate)
    growth = (1 + r) ** months_paid
    balance = principal * growth - emi * (growth - 1) / r
    return max(balance, 0.0)


def loan_state_at(terms: LoanTerms, months_paid: int = 0) -> LoanState:
    """
    Snapshot of ``terms`` after ``months_paid`` installments.

    ``months_paid=0`` gives the opening state of the loan.
    """
    if months_paid < 0 or months_paid > terms.tenure_months:
        raise InvalidLoanInputs(
            f"months_paid must be between 0 and {terms.tenure_months}, got {months_paid}."
        )

    emi = compute_emi(terms.principal, terms.annual_rate, terms.tenure_months, strict=True)
    balance = outstanding_balance(
        terms.principal, terms.annual_rate, terms.tenure_months, months_paid
    )
    return LoanState(
        principal=balance,
        monthly_emi=emi,
        monthly_rate=terms.monthly_rate,
        remaining_tenure=terms.tenure_months - months_paid,
    )
