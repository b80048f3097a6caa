"""Time-value-of-money primitives.

Rates are annual percentages (8 means 8 %). Every function is total: bad or
degenerate inputs map to a defined fallback instead of raising.
"""

from __future__ import annotations

import math
from datetime import datetime, time, timezone
from typing import Optional

from journey.constants import (
    DAYS_PER_YEAR,
    DEFAULT_INVESTMENT_INTEREST_RATE,
    PERIODS_PER_YEAR,
    YEARS_TO_TARGET_HORIZON,
    YEARS_TO_TARGET_TOLERANCE,
)
from journey.models import DateLike, TimeRemaining


def _growth(periodic_rate: float, periods: float) -> float:
    """``(1 + rate) ** periods``, saturating to infinity instead of overflowing."""
    try:
        return (1 + periodic_rate) ** periods
    except OverflowError:
        return math.inf


def future_value(
    present_value: float,
    annual_rate: float,
    years: float,
    compounding_per_year: int = PERIODS_PER_YEAR,
) -> float:
    """
    Compound growth of a lump sum.

        FV = PV * (1 + r/n) ** (n * t)

    Growth too large for a float comes back as ``math.inf``.
    """
    if present_value <= 0:
        return 0.0
    if annual_rate <= 0 or years <= 0:
        return present_value

    r = annual_rate / 100
    n = compounding_per_year
    return present_value * _growth(r / n, n * years)


def required_monthly_payment(future_value_needed: float, annual_rate: float, years: float) -> float:
    """
    Level monthly payment that accumulates to ``future_value_needed``.

        PMT = FV * (r/12) / ((1 + r/12) ** (12 * t) - 1)

    With no time left the whole amount is due now; with no growth (or a rate
    too small to move a float) the amount is split evenly over the remaining
    months. Unbounded growth needs no payment at all.
    """
    if future_value_needed <= 0:
        return 0.0
    if years <= 0:
        return future_value_needed

    total_periods = PERIODS_PER_YEAR * years
    if annual_rate <= 0:
        return future_value_needed / total_periods

    monthly_rate = annual_rate / 100 / PERIODS_PER_YEAR
    growth_factor = _growth(monthly_rate, total_periods) - 1
    if growth_factor == 0:
        return future_value_needed / total_periods
    if math.isinf(growth_factor):
        return 0.0
    return future_value_needed * monthly_rate / growth_factor


def future_value_of_payments(monthly_payment: float, annual_rate: float, years: float) -> float:
    """
    Future value of a level monthly payment stream.

        FV = PMT * ((1 + r/12) ** (12 * t) - 1) / (r/12)
    """
    if monthly_payment <= 0 or years <= 0:
        return 0.0

    total_periods = PERIODS_PER_YEAR * years
    if annual_rate <= 0:
        return monthly_payment * total_periods

    monthly_rate = annual_rate / 100 / PERIODS_PER_YEAR
    growth_factor = _growth(monthly_rate, total_periods) - 1
    if growth_factor == 0:
        return monthly_payment * total_periods
    if math.isinf(growth_factor):
        return math.inf
    return monthly_payment * growth_factor / monthly_rate


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def time_remaining(target_date: DateLike, now: Optional[DateLike] = None) -> TimeRemaining:
    """Whole months and fractional years from ``now`` until ``target_date``, never negative."""
    target = _as_datetime(target_date)
    current = _as_datetime(now) if now is not None else datetime.now(target.tzinfo)

    # naive timestamps are read as UTC when the other side carries a zone
    if (target.tzinfo is None) != (current.tzinfo is None):
        if target.tzinfo is None:
            target = target.replace(tzinfo=timezone.utc)
        else:
            current = current.replace(tzinfo=timezone.utc)

    diff_days = (target - current).total_seconds() / 86400
    years = diff_days / DAYS_PER_YEAR
    months = math.floor(years * PERIODS_PER_YEAR)

    return TimeRemaining(months=max(0, months), years=max(0.0, years))


def years_to_target(
    current_amount: float,
    monthly_contribution: float,
    target_amount: float,
    annual_rate: float = DEFAULT_INVESTMENT_INTEREST_RATE,
) -> Optional[float]:
    """
    Years until ``current_amount`` plus contributions reaches ``target_amount``.

    Bisection over [0, YEARS_TO_TARGET_HORIZON] down to
    YEARS_TO_TARGET_TOLERANCE, rounded up to one decimal. Returns None when
    there is neither growth nor new money. A target never reached inside the
    horizon yields the horizon itself.
    """
    if current_amount >= target_amount:
        return 0.0
    if monthly_contribution <= 0 and annual_rate <= 0:
        return None

    low, high = 0.0, YEARS_TO_TARGET_HORIZON
    while high - low > YEARS_TO_TARGET_TOLERANCE:
        mid = (low + high) / 2
        total = future_value(current_amount, annual_rate, mid) + future_value_of_payments(
            monthly_contribution, annual_rate, mid
        )
        if total < target_amount:
            low = mid
        else:
            high = mid

    return math.ceil(high * 10) / 10
