from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import pandas as pd


class LoanType(str, Enum):
    FIXED = "fixed"
    FLOATING = "floating"


class PrepaymentFrequency(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def interval_months(self) -> int:
        return 12 if self is PrepaymentFrequency.YEARLY else 1


@dataclass(frozen=True)
class LoanTerms:
    principal: float
    annual_rate: float  # annual %
    tenure_months: int

    @classmethod
    def from_years(cls, principal, annual_rate, tenure_years):
        return cls(principal, annual_rate, int(round(tenure_years * 12)))

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate / 1200


@dataclass(frozen=True)
class LoanState:
    """
    Snapshot of a running loan, as seen by the payoff solvers.
    """
    principal: float
    monthly_emi: float
    monthly_rate: float  # fraction, not %
    remaining_tenure: int  # months


@dataclass(frozen=True)
class PrepaymentResult:
    new_tenure_months: int
    new_tenure_years: int
    months_reduced: int
    interest_saved: float
    total_savings: float
    penalty_amount: float = 0.0
    net_savings: float = 0.0


@dataclass(frozen=True)
class ReduceEmiResult:
    new_emi: float
    emi_reduction: float
    interest_saved: float
    penalty_amount: float = 0.0
    net_savings: float = 0.0


@dataclass(frozen=True)
class StepUpResult:
    new_tenure_months: int
    new_tenure_years: int
    months_reduced: int
    interest_saved: float
    total_savings: float
    additional_emi_per_month: float


@dataclass(frozen=True)
class ShorterTenureResult:
    new_emi: float
    emi_increase: float
    interest_saved: float
    total_savings: float


@dataclass(frozen=True)
class PrepaymentPlan:
    prepayment_amount: float
    frequency: PrepaymentFrequency
    original_emi: float
    original_tenure_months: int
    new_tenure_months: int
    months_saved: int
    total_amount_paid: float
    interest_paid: float
    total_prepaid: float
    original_total_amount: float
    original_interest: float
    interest_saved: float
    penalty_amount: float
    net_savings: float
    # DataFrames have no boolean ==; plans compare on their summary figures
    schedule: pd.DataFrame = field(compare=False, repr=False)


@dataclass(frozen=True)
class CarPurchase:
    car_price: float
    down_payment: float
    annual_rate: float  # annual %
    tenure_years: float
    processing_fee: float = 0.0
    km_per_month: float = 0.0
    fuel_cost_per_liter: float = 0.0
    monthly_income: float = 0.0
    # overrides the km/fuel-price estimate when given
    monthly_fuel_expense: Optional[float] = None

    @property
    def loan_amount(self) -> float:
        return max(0.0, self.car_price - self.down_payment)


@dataclass(frozen=True)
class AffordabilityReport:
    emi: float
    monthly_fuel_cost: float
    total_monthly_expense: float
    down_payment_percent: float
    expense_percent: float
    is_down_payment_ok: bool
    is_tenure_ok: bool
    is_expense_ok: bool

    @property
    def is_affordable(self) -> bool:
        return self.is_down_payment_ok and self.is_tenure_ok and self.is_expense_ok


@dataclass(frozen=True)
class TotalCost:
    loan_amount: float
    emi: float
    total_interest: float
    total_loan_payment: float
    processing_fee: float
    total_cost: float
    total_outflow: float
