import streamlit as st
import altair as alt

from carloan import (
    CarPurchase,
    LoanCalculationError,
    LoanTerms,
    amortization_schedule,
    balance_comparison,
    check_affordability,
    format_currency,
    format_tenure,
    impact_metrics,
    loan_state_at,
    simulate_prepayments,
    solve_prepayment,
    solve_shorter_tenure,
    solve_step_up,
    total_cost,
)
from carloan.config import configure_logging, get_settings

# --------------------------------------------------
# Setup
# --------------------------------------------------

settings = get_settings()
configure_logging(settings)

st.set_page_config(layout="wide")
st.title("Car Loan EMI Calculator")

# --------------------------------------------------
# Loan basics
# --------------------------------------------------

c1, c2, c3, c4 = st.columns(4)
car_price = c1.number_input("Car Price", min_value=0, value=1_000_000, step=50_000)
down_payment = c2.number_input("Down Payment", min_value=0, value=200_000, step=10_000)
rate = c3.number_input("Interest Rate (%)", min_value=0.1, max_value=20.0, value=8.0, step=0.1, format="%.2f")
tenure_years = c4.number_input("Tenure (years)", min_value=1, max_value=10, value=3, step=1)

c1, c2, c3, c4 = st.columns(4)
monthly_income = c1.number_input("Monthly Income", min_value=0, value=100_000, step=5_000)
processing_fee = c2.number_input("Processing Fee", min_value=0, value=0, step=1_000)
km_per_month = c3.number_input("Km per Month", min_value=0, value=1_000, step=100)
fuel_price = c4.number_input("Fuel Cost per Liter", min_value=0.0, value=100.0, step=1.0)

purchase = CarPurchase(
    car_price=car_price,
    down_payment=down_payment,
    annual_rate=rate,
    tenure_years=tenure_years,
    processing_fee=processing_fee,
    km_per_month=km_per_month,
    fuel_cost_per_liter=fuel_price,
    monthly_income=monthly_income,
)

report = check_affordability(purchase, settings)
cost = total_cost(purchase)

if report.emi == 0:
    st.info("Enter a car price above the down payment to see your EMI.")
    st.stop()

# --------------------------------------------------
# Results
# --------------------------------------------------

st.subheader("Your Loan")

c1, c2, c3, c4 = st.columns(4)
c1.metric("Loan Amount", format_currency(cost.loan_amount))
c2.metric("Monthly EMI", format_currency(cost.emi))
c3.metric("Total Interest", format_currency(cost.total_interest))
c4.metric("Total Payment", format_currency(cost.total_loan_payment))

st.subheader("Affordability (20/4/10)")

c1, c2, c3 = st.columns(3)
c1.metric(
    "Down Payment",
    f"{report.down_payment_percent:.1f}%",
    "OK" if report.is_down_payment_ok else f"below {settings.min_down_payment_percent:.0f}%",
)
c2.metric(
    "Tenure",
    format_tenure(tenure_years * 12),
    "OK" if report.is_tenure_ok else f"above {settings.max_tenure_years:.0f} years",
)
c3.metric(
    "EMI + Fuel / Income",
    f"{report.expense_percent:.1f}%",
    "OK" if report.is_expense_ok else f"above {settings.max_expense_percent:.0f}%",
)

if report.is_affordable:
    st.success("This car fits the 20/4/10 rule.")
else:
    st.warning("This car stretches the 20/4/10 rule.")

# --------------------------------------------------
# Fast payoff
# --------------------------------------------------

st.subheader("Pay Off Faster")

terms = LoanTerms.from_years(cost.loan_amount, rate, tenure_years)
state = loan_state_at(terms)

prepay_tab, stepup_tab, tenure_tab = st.tabs(["Prepayment", "Step Up EMI", "Shorter Tenure"])

with prepay_tab:
    lump_sum = st.number_input("Lump Sum", min_value=0, value=100_000, step=10_000)
    loan_type = st.radio("Loan Type", ["floating", "fixed"], horizontal=True)
    penalty_rate = 0.0
    if loan_type == "fixed":
        penalty_rate = st.number_input("Penalty (%)", min_value=0.0, max_value=5.0, value=2.0, step=0.5)

    try:
        result = solve_prepayment(state, lump_sum, loan_type, penalty_rate, strict=settings.strict)
    except LoanCalculationError as exc:
        st.error(str(exc))
    else:
        c1, c2, c3 = st.columns(3)
        c1.metric("New Tenure", format_tenure(result.new_tenure_months))
        c2.metric("Tenure Reduced", format_tenure(result.months_reduced))
        c3.metric("Net Savings", format_currency(result.net_savings))
        if result.penalty_amount:
            st.caption(f"After a prepayment penalty of {format_currency(result.penalty_amount)}")

with stepup_tab:
    new_emi = st.number_input("New EMI", min_value=0, value=int(round(state.monthly_emi * 1.2)), step=500)

    try:
        result = solve_step_up(state, new_emi, strict=settings.strict)
    except LoanCalculationError as exc:
        st.error(str(exc))
    else:
        c1, c2, c3 = st.columns(3)
        c1.metric("New Tenure", format_tenure(result.new_tenure_months))
        c2.metric("Extra per Month", format_currency(result.additional_emi_per_month))
        c3.metric("Interest Saved", format_currency(result.interest_saved))

with tenure_tab:
    new_tenure = st.number_input(
        "New Tenure (months)",
        min_value=1,
        max_value=state.remaining_tenure,
        value=max(1, state.remaining_tenure - 12),
        step=1,
    )

    try:
        result = solve_shorter_tenure(state, new_tenure, strict=settings.strict)
    except LoanCalculationError as exc:
        st.error(str(exc))
    else:
        c1, c2, c3 = st.columns(3)
        c1.metric("New EMI", format_currency(result.new_emi))
        c2.metric("EMI Increase", format_currency(result.emi_increase))
        c3.metric("Interest Saved", format_currency(result.interest_saved))

# --------------------------------------------------
# Recurring prepayments
# --------------------------------------------------

st.subheader("Recurring Prepayments")

c1, c2 = st.columns(2)
plan_amount = c1.number_input(
    "Prepayment Amount", min_value=0, value=int(round(cost.loan_amount * 0.02)), step=1_000
)
frequency = c2.radio("Frequency", ["yearly", "monthly"], horizontal=True)

plan = simulate_prepayments(
    cost.loan_amount, rate, terms.tenure_months, plan_amount, frequency, strict=settings.strict
)
baseline_df = amortization_schedule(cost.loan_amount, rate, terms.tenure_months)

impact = impact_metrics(baseline_df, plan.schedule)

c1, c2, c3 = st.columns(3)

c1.metric(
    "Interest Saved",
    format_currency(impact["interest_saved"])
)

c2.metric(
    "Loan Tenure Reduced",
    format_tenure(impact["months_saved"])
)

c3.metric(
    "Scenario Tenure",
    format_tenure(impact["scenario_months"])
)

chart_df = balance_comparison(baseline_df, plan.schedule)

chart = alt.Chart(chart_df).mark_line(strokeWidth=3).encode(
    x="Month:Q",
    y="Outstanding:Q",
    color=alt.Color(
        "Type:N",
        scale=alt.Scale(
            domain=["Baseline Outstanding", "Scenario Outstanding"],
            range=["#d62728", "#2ca02c"]  # red, green
        ),
        legend=alt.Legend(title="Schedule")
    )
).properties(
    height=400,
    title="Outstanding Balance: Baseline vs Scenario"
)

st.altair_chart(chart, width='stretch')

st.subheader("Amortization Schedule")
st.dataframe(plan.schedule.round(2), width='stretch')
