from streamlit.testing.v1 import AppTest


def run_app():
    at = AppTest.from_file("../app.py", default_timeout=30)
    return at.run()


def metric(at, label):
    return next(m for m in at.metric if m.label == label)


def test_default_loan_renders():
    at = run_app()
    assert not at.exception
    assert metric(at, "Loan Amount").value == "₹8,00,000"
    assert metric(at, "Monthly EMI").value == "₹25,069"
    assert len(at.warning) == 1  # EMI and fuel are above 10% of income


def test_step_up_tab_shortens_tenure():
    at = run_app()
    new_emi = next(n for n in at.number_input if n.label == "New EMI")
    new_emi.set_value(40_000).run()
    assert not at.exception
    assert metric(at, "Extra per Month").value == "₹14,931"


def test_down_payment_above_price_stops_early():
    at = run_app()
    down = next(n for n in at.number_input if n.label == "Down Payment")
    down.set_value(2_000_000).run()
    assert not at.exception
    assert len(at.info) == 1
    assert not at.metric
