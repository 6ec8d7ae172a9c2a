"""
Car affordability checks (the 20/4/10 rule) and total cost of ownership.

The rule of thumb for a car purchase:
    i.   at least 20% of the price as down payment
    ii.  a loan of no more than 4 years
    iii. EMI plus running costs within 10% of monthly income
"""

import logging

from .config import Settings, get_settings
from .emi import emi_for_years
from .interest import total_interest
from .models import AffordabilityReport, CarPurchase, TotalCost

logger = logging.getLogger(__name__)


def monthly_fuel_cost(km_per_month, fuel_cost_per_liter, km_per_liter=15.0):
    if km_per_month <= 0 or fuel_cost_per_liter <= 0 or km_per_liter <= 0:
        return 0.0
    return km_per_month / km_per_liter * fuel_cost_per_liter


def _fuel_cost(purchase: CarPurchase, settings: Settings):
    if purchase.monthly_fuel_expense is not None:
        return max(purchase.monthly_fuel_expense, 0.0)
    return monthly_fuel_cost(
        purchase.km_per_month, purchase.fuel_cost_per_liter, settings.fuel_km_per_liter
    )


def check_affordability(purchase: CarPurchase, settings: Settings = None) -> AffordabilityReport:
    """
    Apply the 20/4/10 rule to a purchase.

    An unknown (zero) monthly income never fails the expense check.
    """
    settings = settings or get_settings()

    emi = emi_for_years(purchase.loan_amount, purchase.annual_rate, purchase.tenure_years)
    fuel = _fuel_cost(purchase, settings)
    total_monthly = emi + fuel

    if purchase.car_price > 0:
        down_payment_percent = purchase.down_payment / purchase.car_price * 100
    else:
        down_payment_percent = 0.0

    has_income = purchase.monthly_income > 0 and total_monthly > 0
    expense_percent = total_monthly / purchase.monthly_income * 100 if has_income else 0.0

    report = AffordabilityReport(
        emi=emi,
        monthly_fuel_cost=fuel,
        total_monthly_expense=total_monthly,
        down_payment_percent=down_payment_percent,
        expense_percent=expense_percent,
        is_down_payment_ok=down_payment_percent >= settings.min_down_payment_percent,
        is_tenure_ok=0 < purchase.tenure_years <= settings.max_tenure_years,
        is_expense_ok=expense_percent <= settings.max_expense_percent if has_income else True,
    )

    logger.debug(
        "Affordability: down=%.1f%% tenure=%sy expense=%.1f%% -> %s",
        down_payment_percent,
        purchase.tenure_years,
        expense_percent,
        report.is_affordable,
    )
    return report


def total_cost(purchase: CarPurchase) -> TotalCost:
    loan_amount = purchase.loan_amount
    emi = emi_for_years(loan_amount, purchase.annual_rate, purchase.tenure_years)
    months = purchase.tenure_years * 12

    if emi > 0:
        interest = total_interest(loan_amount, emi, months)
        loan_payment = emi * months
    else:
        interest = 0.0
        loan_payment = 0.0

    fee = max(purchase.processing_fee, 0.0)

    return TotalCost(
        loan_amount=loan_amount,
        emi=emi,
        total_interest=interest,
        total_loan_payment=loan_payment,
        processing_fee=fee,
        total_cost=purchase.car_price + fee,
        total_outflow=purchase.down_payment + loan_payment + fee,
    )
