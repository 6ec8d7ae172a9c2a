"""
Environment configuration for the calculator.

Values are read from the process environment after loading a local ``.env``
file, so the Streamlit view can be tuned without code changes.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv

from .exceptions import InvalidLoanInputs


def _env_float(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidLoanInputs(f"{name} must be a number, got {raw!r}")


def _env_bool(name, default):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    strict: bool = False
    min_down_payment_percent: float = 20.0
    max_tenure_years: float = 4.0
    max_expense_percent: float = 10.0
    fuel_km_per_liter: float = 15.0

    @classmethod
    def from_env(cls):
        load_dotenv(find_dotenv(usecwd=True))  # loads .env into environment
        return cls(
            log_level=os.getenv("CARLOAN_LOG_LEVEL", "WARNING").upper(),
            strict=_env_bool("CARLOAN_STRICT", False),
            min_down_payment_percent=_env_float("CARLOAN_MIN_DOWN_PAYMENT_PERCENT", 20.0),
            max_tenure_years=_env_float("CARLOAN_MAX_TENURE_YEARS", 4.0),
            max_expense_percent=_env_float("CARLOAN_MAX_EXPENSE_PERCENT", 10.0),
            fuel_km_per_liter=_env_float("CARLOAN_FUEL_KM_PER_LITER", 15.0),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(settings: Settings = None):
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
