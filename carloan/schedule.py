import logging
from datetime import date

import pandas as pd

from .emi import compute_emi, monthly_rate
from .exceptions import InvalidLoanInputs
from .models import LoanType, PrepaymentFrequency, PrepaymentPlan
from .payoff import prepayment_penalty

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = ["Month", "EMI", "Interest", "Principal Paid", "Prepayment", "Outstanding"]

# balances at or below one currency unit count as closed
SETTLED_BALANCE = 1.0

# extra months allowed past the contractual tenure before the loop gives up
OVERRUN_MONTHS = 60


def _frequency(frequency):
    try:
        return PrepaymentFrequency(frequency)
    except ValueError:
        raise InvalidLoanInputs(
            f"Unknown prepayment frequency {frequency!r}; expected 'monthly' or 'yearly'."
        )


def _installment_date(start_date, m):
    year = start_date.year + (start_date.month - 1 + m) // 12
    month = (start_date.month - 1 + m) % 12 + 1
    return date(year, month, 1)


def amortization_schedule(
    principal,
    annual_rate,
    tenure_months,
    prepayment_amount=0.0,
    frequency=PrepaymentFrequency.YEARLY,
    start_date: date = None,
) -> pd.DataFrame:
    """
    Month-by-month schedule under the "reduce tenure" strategy.

    A due prepayment is applied before that month's interest is charged, so
    interest accrues on the reduced balance. The EMI stays fixed and the
    last installment is cut down to whatever is left.
    """
    interval = _frequency(frequency).interval_months
    emi = compute_emi(principal, annual_rate, tenure_months)
    if emi == 0:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)

    r = monthly_rate(annual_rate)
    outstanding = principal
    rows = []
    m = 0

    while outstanding > SETTLED_BALANCE and m < tenure_months + OVERRUN_MONTHS:
        m += 1

        prepay = 0.0
        if prepayment_amount > 0 and m % interval == 0:
            prepay = min(prepayment_amount, outstanding)
            outstanding -= prepay

        interest = 0.0
        payment = 0.0
        principal_paid = 0.0

        if outstanding > SETTLED_BALANCE:
            interest = outstanding * r
            payment = emi
            principal_paid = min(emi - interest, outstanding)

            if outstanding <= emi - interest:
                payment = outstanding + interest
                principal_paid = outstanding

            if principal_paid <= 0:
                logger.warning(
                    "EMI %.2f no longer covers interest %.2f at month %d", emi, interest, m
                )
                break

            outstanding -= principal_paid

        row = {
            "Month": m,
            "EMI": payment,
            "Interest": interest,
            "Principal Paid": principal_paid,
            "Prepayment": prepay,
            "Outstanding": max(outstanding, 0.0),
        }
        if start_date is not None:
            row["Date"] = _installment_date(start_date, m - 1)
        rows.append(row)

    return pd.DataFrame(rows)


def _empty_plan(prepayment_amount, frequency, tenure_months):
    return PrepaymentPlan(
        prepayment_amount=prepayment_amount,
        frequency=frequency,
        original_emi=0.0,
        original_tenure_months=tenure_months,
        new_tenure_months=tenure_months,
        months_saved=0,
        total_amount_paid=0.0,
        interest_paid=0.0,
        total_prepaid=0.0,
        original_total_amount=0.0,
        original_interest=0.0,
        interest_saved=0.0,
        penalty_amount=0.0,
        net_savings=0.0,
        schedule=pd.DataFrame(columns=SCHEDULE_COLUMNS),
    )


def simulate_prepayments(
    principal,
    annual_rate,
    tenure_months,
    prepayment_amount,
    frequency=PrepaymentFrequency.YEARLY,
    loan_type=LoanType.FLOATING,
    penalty_rate=0.0,
    *,
    strict=False,
) -> PrepaymentPlan:
    """
    Run a recurring prepayment plan against the baseline loan.

    Steps:
        1. Baseline EMI, total payment and interest without prepayments
        2. Month-by-month schedule with prepayments applied before interest
        3. Penalty on the total prepaid for fixed-rate loans
        4. Savings against the baseline, net of penalty (never below 0)

    Returns:
        PrepaymentPlan with the summary figures and the schedule DataFrame.
    """
    frequency = _frequency(frequency)

    if principal <= 0 or annual_rate <= 0 or tenure_months <= 0 or prepayment_amount < 0:
        if strict:
            raise InvalidLoanInputs(
                "Loan amount, rate and tenure must be greater than 0 and the "
                "prepayment cannot be negative."
            )
        return _empty_plan(prepayment_amount, frequency, tenure_months)

    original_emi = compute_emi(principal, annual_rate, tenure_months)
    original_total = original_emi * tenure_months
    original_interest = original_total - principal

    schedule = amortization_schedule(
        principal, annual_rate, tenure_months, prepayment_amount, frequency
    )

    interest_paid, months, total_prepaid = _schedule_totals(schedule)
    total_emis = float(schedule["EMI"].sum())

    penalty = prepayment_penalty(total_prepaid, loan_type, penalty_rate)
    interest_saved = original_interest - interest_paid

    logger.info(
        "Prepayment plan %.2f %s: tenure %d -> %d, interest_saved=%.2f, penalty=%.2f",
        prepayment_amount,
        frequency.value,
        tenure_months,
        months,
        interest_saved,
        penalty,
    )

    return PrepaymentPlan(
        prepayment_amount=prepayment_amount,
        frequency=frequency,
        original_emi=original_emi,
        original_tenure_months=tenure_months,
        new_tenure_months=months,
        months_saved=tenure_months - months,
        total_amount_paid=total_emis + total_prepaid + penalty,
        interest_paid=interest_paid,
        total_prepaid=total_prepaid,
        original_total_amount=original_total,
        original_interest=original_interest,
        interest_saved=interest_saved,
        penalty_amount=penalty,
        net_savings=max(0.0, interest_saved - penalty),
        schedule=schedule,
    )


def _schedule_totals(df):
    return float(df["Interest"].sum()), len(df), float(df["Prepayment"].sum())


def impact_metrics(baseline_df, scenario_df):
    """
    Headline figures of a scenario schedule against the baseline schedule.

    Both frames come from amortization_schedule; months are counted as rows.
    """
    baseline_interest, baseline_months, _ = _schedule_totals(baseline_df)
    scenario_interest, scenario_months, prepaid = _schedule_totals(scenario_df)

    return {
        "interest_saved": round(baseline_interest - scenario_interest, 2),
        "months_saved": baseline_months - scenario_months,
        "baseline_months": baseline_months,
        "scenario_months": scenario_months,
        "total_prepaid": round(prepaid, 2),
    }


def balance_comparison(baseline_df, scenario_df):
    """Long-format outstanding balances, one row per month and schedule."""
    comparison_df = (
        baseline_df[["Month", "Outstanding"]]
        .rename(columns={"Outstanding": "Baseline Outstanding"})
        .merge(
            scenario_df[["Month", "Outstanding"]]
            .rename(columns={"Outstanding": "Scenario Outstanding"}),
            on="Month",
            how="outer"
        )
        .fillna(0)
    )

    return comparison_df.melt(
        id_vars="Month",
        value_vars=["Baseline Outstanding", "Scenario Outstanding"],
        var_name="Type",
        value_name="Outstanding"
    )
