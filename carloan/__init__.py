from .affordability import check_affordability, monthly_fuel_cost, total_cost
from .emi import (
    annuity_payment,
    compute_emi,
    emi_for_years,
    loan_state_at,
    monthly_rate,
    outstanding_balance,
)
from .exceptions import InvalidLoanInputs, InvalidLoanState, LoanCalculationError
from .formatting import format_currency, format_tenure
from .interest import remaining_interest, total_interest
from .models import (
    AffordabilityReport,
    CarPurchase,
    LoanState,
    LoanTerms,
    LoanType,
    PrepaymentFrequency,
    PrepaymentPlan,
    PrepaymentResult,
    ReduceEmiResult,
    ShorterTenureResult,
    StepUpResult,
    TotalCost,
)
from .payoff import (
    solve_prepayment,
    solve_reduce_emi,
    solve_shorter_tenure,
    solve_step_up,
    solve_tenure,
)
from .schedule import (
    amortization_schedule,
    balance_comparison,
    impact_metrics,
    simulate_prepayments,
)

__version__ = "0.1.0"
