import logging
import os

import pytest

from carloan import InvalidLoanInputs
from carloan import config
from carloan.config import Settings, configure_logging, get_settings

ENV_VARS = [
    "CARLOAN_LOG_LEVEL",
    "CARLOAN_STRICT",
    "CARLOAN_MIN_DOWN_PAYMENT_PERCENT",
    "CARLOAN_MAX_TENURE_YEARS",
    "CARLOAN_MAX_EXPENSE_PERCENT",
    "CARLOAN_FUEL_KM_PER_LITER",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.log_level == "WARNING"
    assert settings.strict is False
    assert settings.min_down_payment_percent == 20
    assert settings.max_tenure_years == 4
    assert settings.max_expense_percent == 10
    assert settings.fuel_km_per_liter == 15


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("CARLOAN_LOG_LEVEL", "debug")
    monkeypatch.setenv("CARLOAN_STRICT", "yes")
    monkeypatch.setenv("CARLOAN_MAX_TENURE_YEARS", "5")
    monkeypatch.setenv("CARLOAN_FUEL_KM_PER_LITER", "18.5")

    settings = Settings.from_env()
    assert settings.log_level == "DEBUG"
    assert settings.strict is True
    assert settings.max_tenure_years == 5
    assert settings.fuel_km_per_liter == 18.5


def test_blank_number_uses_default(monkeypatch):
    monkeypatch.setenv("CARLOAN_MAX_EXPENSE_PERCENT", " ")
    assert Settings.from_env().max_expense_percent == 10


def test_bad_number(monkeypatch):
    monkeypatch.setenv("CARLOAN_MIN_DOWN_PAYMENT_PERCENT", "twenty")
    with pytest.raises(InvalidLoanInputs):
        Settings.from_env()


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("CARLOAN_STRICT", "true")
    assert get_settings() is first


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(Settings(log_level="INFO"))
    assert calls[0]["level"] == logging.INFO


def test_dotenv_loaded_when_settings_are_read(monkeypatch):
    calls = []
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: calls.append(args))
    Settings.from_env()
    assert len(calls) == 1


def test_reads_dotenv_file_from_working_directory(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("CARLOAN_MAX_TENURE_YEARS=6\n")
    monkeypatch.chdir(tmp_path)
    try:
        assert Settings.from_env().max_tenure_years == 6
    finally:
        os.environ.pop("CARLOAN_MAX_TENURE_YEARS", None)
