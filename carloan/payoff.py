"""
Fast payoff solvers.

Each solver takes a LoanState snapshot and answers one "what if" question:

    solve_prepayment      lump sum, EMI unchanged, tenure shortens
    solve_reduce_emi      lump sum, tenure unchanged, EMI shrinks
    solve_step_up         higher EMI, principal unchanged, tenure shortens
    solve_shorter_tenure  chosen shorter tenure, principal unchanged, EMI grows

Tenure solves use n = ln(EMI / (EMI - r * P)) / ln(1 + r), rounded up to
whole months so the EMI always fully amortizes the principal by month n.
"""

import logging
import math

from .emi import annuity_payment
from .exceptions import InvalidLoanInputs, InvalidLoanState
from .interest import remaining_interest, total_interest
from .models import (
    LoanState,
    LoanType,
    PrepaymentResult,
    ReduceEmiResult,
    ShorterTenureResult,
    StepUpResult,
)

logger = logging.getLogger(__name__)

# absorbs float noise so an exact 36.0000000001 does not become 37
TENURE_EPSILON = 1e-9


def _years(months):
    return math.ceil(months / 12)


def _loan_type(loan_type):
    try:
        return LoanType(loan_type)
    except ValueError:
        raise InvalidLoanInputs(
            f"Unknown loan type {loan_type!r}; expected 'fixed' or 'floating'."
        )


def prepayment_penalty(prepayment_amount, loan_type=LoanType.FLOATING, penalty_rate=0.0):
    """Foreclosure charge: a share of the prepayment on fixed-rate loans only."""
    if _loan_type(loan_type) is LoanType.FIXED:
        return prepayment_amount * penalty_rate / 100
    return 0.0


def covers_interest(emi, rate, principal):
    """True when ``emi`` pays more than one month's interest on ``principal``."""
    return emi > 0 and emi > rate * principal


def solve_tenure(principal, emi, rate):
    """Whole months needed for ``emi`` to amortize ``principal`` at ``rate``."""
    if not covers_interest(emi, rate, principal):
        raise InvalidLoanState(
            f"EMI {emi:.2f} does not cover monthly interest "
            f"{rate * principal:.2f} on principal {principal:.2f}."
        )
    if rate == 0:
        months = principal / emi
    else:
        months = math.log(emi / (emi - rate * principal)) / math.log(1 + rate)
    return max(math.ceil(months - TENURE_EPSILON), 0)


def _reject(message, strict):
    if strict:
        raise InvalidLoanInputs(message)
    logger.warning("Ignoring invalid payoff request: %s", message)


def _unchanged_prepayment(state):
    return PrepaymentResult(
        new_tenure_months=state.remaining_tenure,
        new_tenure_years=_years(state.remaining_tenure),
        months_reduced=0,
        interest_saved=0.0,
        total_savings=0.0,
        penalty_amount=0.0,
        net_savings=0.0,
    )


def solve_prepayment(
    state: LoanState,
    prepayment_amount,
    loan_type=LoanType.FLOATING,
    penalty_rate=0.0,
    *,
    strict=True,
) -> PrepaymentResult:
    """
    Impact of a lump-sum prepayment under the "reduce tenure" strategy.

    The EMI and rate stay fixed; the new tenure is solved for the reduced
    principal. A prepayment that clears the principal settles the loan.

    Args:
        state: The loan snapshot before the prepayment.
        prepayment_amount: Lump sum applied to principal.
        loan_type: 'fixed' loans are charged ``penalty_rate`` percent of the
            prepayment; 'floating' loans are penalty free.
        penalty_rate: Foreclosure charge as a percentage.
        strict: Raise on invalid input instead of returning an unchanged result.

    Raises:
        InvalidLoanInputs: negative prepayment or penalty rate (strict only),
            or an unknown loan type.
        InvalidLoanState: the EMI does not cover interest on the reduced
            principal (strict only).
    """
    penalty = prepayment_penalty(prepayment_amount, loan_type, penalty_rate)

    if prepayment_amount < 0 or penalty_rate < 0:
        _reject(
            f"prepayment ({prepayment_amount}) and penalty rate ({penalty_rate}) "
            "cannot be negative.",
            strict,
        )
        return _unchanged_prepayment(state)

    new_principal = state.principal - prepayment_amount

    if new_principal <= 0:
        saved = remaining_interest(state)
        logger.debug(
            "Prepayment %.2f settles loan: interest_saved=%.2f penalty=%.2f",
            prepayment_amount,
            saved,
            penalty,
        )
        return PrepaymentResult(
            new_tenure_months=0,
            new_tenure_years=0,
            months_reduced=state.remaining_tenure,
            interest_saved=saved,
            total_savings=saved,
            penalty_amount=penalty,
            net_savings=saved - penalty,
        )

    try:
        new_tenure = solve_tenure(new_principal, state.monthly_emi, state.monthly_rate)
    except InvalidLoanState as exc:
        if strict:
            raise
        logger.warning("Prepayment left unsolved: %s", exc)
        return _unchanged_prepayment(state)

    interest_saved = remaining_interest(state) - total_interest(
        new_principal, state.monthly_emi, new_tenure
    )

    logger.debug(
        "Prepayment %.2f: tenure %d -> %d, interest_saved=%.2f penalty=%.2f",
        prepayment_amount,
        state.remaining_tenure,
        new_tenure,
        interest_saved,
        penalty,
    )

    return PrepaymentResult(
        new_tenure_months=new_tenure,
        new_tenure_years=_years(new_tenure),
        months_reduced=state.remaining_tenure - new_tenure,
        interest_saved=interest_saved,
        total_savings=interest_saved,
        penalty_amount=penalty,
        net_savings=interest_saved - penalty,
    )


def solve_reduce_emi(
    state: LoanState,
    prepayment_amount,
    loan_type=LoanType.FLOATING,
    penalty_rate=0.0,
    *,
    strict=True,
) -> ReduceEmiResult:
    """Lump-sum prepayment that keeps the tenure and lowers the EMI instead."""
    penalty = prepayment_penalty(prepayment_amount, loan_type, penalty_rate)

    if prepayment_amount < 0 or penalty_rate < 0 or state.remaining_tenure <= 0:
        _reject(
            f"cannot reduce EMI with prepayment={prepayment_amount}, "
            f"penalty_rate={penalty_rate}, remaining_tenure={state.remaining_tenure}.",
            strict,
        )
        return ReduceEmiResult(state.monthly_emi, 0.0, 0.0)

    new_principal = max(state.principal - prepayment_amount, 0.0)
    if new_principal == 0:
        new_emi = 0.0
    else:
        new_emi = annuity_payment(new_principal, state.monthly_rate, state.remaining_tenure)

    interest_saved = remaining_interest(state) - total_interest(
        new_principal, new_emi, state.remaining_tenure
    )

    return ReduceEmiResult(
        new_emi=new_emi,
        emi_reduction=state.monthly_emi - new_emi,
        interest_saved=interest_saved,
        penalty_amount=penalty,
        net_savings=interest_saved - penalty,
    )


def solve_step_up(state: LoanState, new_emi, *, strict=True) -> StepUpResult:
    """
    Shorter tenure from paying a higher EMI on the same principal.

    A new EMI at or below the current one changes nothing.
    """
    unchanged = StepUpResult(
        new_tenure_months=state.remaining_tenure,
        new_tenure_years=_years(state.remaining_tenure),
        months_reduced=0,
        interest_saved=0.0,
        total_savings=0.0,
        additional_emi_per_month=0.0,
    )

    if new_emi <= state.monthly_emi:
        return unchanged

    try:
        new_tenure = solve_tenure(state.principal, new_emi, state.monthly_rate)
    except InvalidLoanState as exc:
        if strict:
            raise
        logger.warning("Step-up left unsolved: %s", exc)
        return unchanged

    interest_saved = remaining_interest(state) - total_interest(
        state.principal, new_emi, new_tenure
    )

    logger.debug(
        "Step-up EMI %.2f -> %.2f: tenure %d -> %d, interest_saved=%.2f",
        state.monthly_emi,
        new_emi,
        state.remaining_tenure,
        new_tenure,
        interest_saved,
    )

    return StepUpResult(
        new_tenure_months=new_tenure,
        new_tenure_years=_years(new_tenure),
        months_reduced=state.remaining_tenure - new_tenure,
        interest_saved=interest_saved,
        total_savings=interest_saved,
        additional_emi_per_month=new_emi - state.monthly_emi,
    )


def solve_shorter_tenure(state: LoanState, new_tenure_months, *, strict=True) -> ShorterTenureResult:
    """
    EMI needed to close the loan in ``new_tenure_months`` instead.

    A tenure at or above the remaining one changes nothing.
    """
    unchanged = ShorterTenureResult(
        new_emi=state.monthly_emi,
        emi_increase=0.0,
        interest_saved=0.0,
        total_savings=0.0,
    )

    if new_tenure_months >= state.remaining_tenure:
        return unchanged

    if new_tenure_months <= 0:
        _reject(f"new tenure must be at least 1 month, got {new_tenure_months}.", strict)
        return unchanged

    new_emi = annuity_payment(state.principal, state.monthly_rate, new_tenure_months)
    interest_saved = remaining_interest(state) - total_interest(
        state.principal, new_emi, new_tenure_months
    )

    logger.debug(
        "Shorter tenure %d -> %d: EMI %.2f -> %.2f, interest_saved=%.2f",
        state.remaining_tenure,
        new_tenure_months,
        state.monthly_emi,
        new_emi,
        interest_saved,
    )

    return ShorterTenureResult(
        new_emi=new_emi,
        emi_increase=new_emi - state.monthly_emi,
        interest_saved=interest_saved,
        total_savings=interest_saved,
    )
