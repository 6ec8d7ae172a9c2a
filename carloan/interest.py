from .models import LoanState


def remaining_interest(state: LoanState):
    """Interest still to be paid if the loan runs its remaining course."""
    return state.monthly_emi * state.remaining_tenure - state.principal


def total_interest(principal, emi, tenure_months):
    # callers must pass an EMI consistent with principal and tenure
    return emi * tenure_months - principal
