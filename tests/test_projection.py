from __future__ import annotations

import math
from datetime import date, datetime
from math import isclose

import pytest
from pydantic import ValidationError

from journey.constants import MILESTONES
from journey.core.projection import (
    milestone_ladder,
    milestone_progress,
    project_contribution,
    projection_timeline,
)
from journey.core.timevalue import future_value, time_remaining
from journey.models import Account, Currency

NOW = datetime(2025, 1, 1)
TEN_YEARS_OUT = date(2035, 1, 1)
RATES = {"USD": 1, "EUR": 0.92}


def test_no_accounts_needs_the_whole_target():
    result = project_contribution([], 1_000_000, TEN_YEARS_OUT, 8, RATES, now=NOW)

    assert result.current_net_worth_usd == 0
    assert result.gap_to_target == 1_000_000
    assert result.monthly_contribution_needed > 0
    assert not result.on_track
    # contributions alone land exactly on target
    assert isclose(result.projected_net_worth_usd, 1_000_000, rel_tol=1e-9)


def test_past_target_date_is_terminal():
    accounts = [Account(balance=250_000, is_investment=True)]
    result = project_contribution(accounts, 1_000_000, date(2020, 1, 1), 8, RATES, now=NOW)

    assert result.monthly_contribution_needed == 0
    assert result.months_remaining == 0
    assert result.years_remaining == 0
    assert result.future_value_of_current_holdings == 250_000
    assert result.projected_net_worth_usd == 250_000
    assert result.gap_to_target == 750_000
    assert not result.on_track


def test_past_target_date_already_reached():
    accounts = [Account(balance=1_200_000)]
    result = project_contribution(accounts, 1_000_000, date(2020, 1, 1), 8, RATES, now=NOW)

    assert result.gap_to_target == 0
    assert result.on_track


def test_explicit_zero_rate_investment_does_not_grow():
    accounts = [
        Account(balance=500_000, currency=Currency.USD, is_investment=True, interest_rate_pa=0)
    ]
    result = project_contribution(accounts, 1_000_000, TEN_YEARS_OUT, 8, RATES, now=NOW)

    assert result.future_value_of_current_holdings == 500_000
    assert result.gap_to_target == 500_000


def test_unset_rate_investment_grows_at_default():
    accounts = [Account(balance=100_000, is_investment=True)]
    result = project_contribution(accounts, 1_000_000, TEN_YEARS_OUT, 8, RATES, now=NOW)

    years = time_remaining(TEN_YEARS_OUT, NOW).years
    assert isclose(result.future_value_of_current_holdings, future_value(100_000, 8, years))


def test_each_account_compounds_at_its_own_rate(mixed_accounts):
    result = project_contribution(mixed_accounts, 1_000_000, TEN_YEARS_OUT, 8, RATES, now=NOW)
    years = time_remaining(TEN_YEARS_OUT, NOW).years

    expected = (
        future_value(40_000, 8, years)  # brokerage, default rate
        + 5_000  # checking, flat
        + future_value(10_000, 3, years)  # euro savings in USD, own rate
    )
    assert isclose(result.future_value_of_current_holdings, expected)
    assert isclose(result.current_net_worth_usd, 55_000)
    assert isclose(result.current_investments_usd, 40_000)
    assert isclose(result.current_cash_usd, 15_000)
    assert result.future_value_of_current_holdings > result.current_net_worth_usd


def test_projection_reaches_target_when_contributing():
    accounts = [Account(balance=50_000, is_investment=True, interest_rate_pa=6)]
    result = project_contribution(accounts, 1_000_000, TEN_YEARS_OUT, 8, RATES, now=NOW)

    assert isclose(result.projected_net_worth_usd, result.target_amount, rel_tol=1e-9)
    assert isclose(result.progress_percentage, 5.0)
    assert result.months_remaining == 119
    assert result.target_date == TEN_YEARS_OUT


def test_no_gap_means_on_track():
    accounts = [Account(balance=2_000_000, is_investment=True)]
    result = project_contribution(accounts, 1_000_000, TEN_YEARS_OUT, 8, RATES, now=NOW)

    assert result.gap_to_target == 0
    assert result.monthly_contribution_needed == 0
    assert result.on_track
    assert result.projected_net_worth_usd == result.future_value_of_current_holdings


def test_on_track_when_contribution_small_relative_to_net_worth():
    accounts = [Account(balance=500_000)]
    result = project_contribution(accounts, 1_000_000, TEN_YEARS_OUT, 8, RATES, now=NOW)

    assert 0 < result.monthly_contribution_needed < 50_000
    assert result.on_track


def test_on_track_ratio_is_configurable():
    accounts = [Account(balance=500_000)]
    result = project_contribution(
        accounts, 1_000_000, TEN_YEARS_OUT, 8, RATES, now=NOW, on_track_ratio=0.001
    )
    assert not result.on_track


def test_off_track_with_small_balance():
    result = project_contribution(
        [Account(balance=1_000)], 1_000_000, TEN_YEARS_OUT, 8, RATES, now=NOW
    )
    assert not result.on_track


def test_non_positive_target_is_trivially_met():
    result = project_contribution(
        [Account(balance=10)], 0, TEN_YEARS_OUT, 8, RATES, now=NOW
    )
    assert result.gap_to_target == 0
    assert result.monthly_contribution_needed == 0
    assert result.progress_percentage == 0
    assert result.on_track


def test_zero_default_rate_splits_gap_evenly():
    result = project_contribution([], 120_000, datetime(2035, 1, 1), 0, RATES, now=NOW)
    assert isclose(result.monthly_contribution_needed, 120_000 / (12 * result.years_remaining))
    assert isclose(result.projected_net_worth_usd, 120_000)


def test_result_is_immutable():
    result = project_contribution([], now=NOW)
    with pytest.raises(ValidationError):
        result.gap_to_target = 0


def test_same_inputs_same_result(mixed_accounts):
    first = project_contribution(mixed_accounts, 1_000_000, TEN_YEARS_OUT, 8, RATES, now=NOW)
    second = project_contribution(mixed_accounts, 1_000_000, TEN_YEARS_OUT, 8, RATES, now=NOW)
    assert first == second


def test_result_serializes_with_dashboard_field_names():
    dumped = project_contribution([], now=NOW).model_dump(by_alias=True)
    assert {"currentNetWorthUSD", "gapToTarget", "monthlyContributionNeeded", "onTrack"} <= set(dumped)


def test_timeline_starts_at_current_net_worth(mixed_accounts):
    points = projection_timeline(mixed_accounts, 500, years=3, investment_rate=8, rates=RATES, now=NOW)

    assert [point.year for point in points] == [0, 1, 2, 3]
    assert isclose(points[0].projected_value, 55_000)
    assert points[0].date == NOW
    assert points[3].date == datetime(2028, 1, 1)
    values = [point.projected_value for point in points]
    assert values == sorted(values)


def test_timeline_leap_day_start():
    points = projection_timeline([], 0, years=1, now=datetime(2024, 2, 29))
    assert points[1].date == datetime(2025, 2, 28)


def test_milestone_progress():
    halfway = milestone_progress(5_000, 10_000)
    assert halfway.percentage == 50
    assert halfway.remaining == 5_000
    assert not halfway.achieved

    passed = milestone_progress(20_000, 10_000)
    assert passed.percentage == 100
    assert passed.remaining == 0
    assert passed.achieved


def test_milestone_ladder_is_ascending():
    ladder = milestone_ladder(60_000)
    assert [rung.amount for rung in ladder] == list(MILESTONES)
    assert [rung.achieved for rung in ladder[:3]] == [True, True, True]
    assert not any(rung.achieved for rung in ladder[3:])


@pytest.mark.parametrize("account_rate", [1e-18, 1000, 1e4, math.inf])
@pytest.mark.parametrize("default_rate", [1e-18, 1e4, math.inf])
def test_projection_never_raises_on_extreme_rates(account_rate, default_rate):
    accounts = [
        Account(balance=1_000, is_investment=True, interest_rate_pa=account_rate),
        Account(balance=500, interest_rate_pa=account_rate),
    ]
    result = project_contribution(
        accounts, 1_000_000, date(2125, 1, 1), default_rate, RATES, now=NOW
    )

    assert result.current_net_worth_usd == 1_500
    assert result.monthly_contribution_needed >= 0
    assert not math.isnan(result.monthly_contribution_needed)
    assert result.future_value_of_current_holdings >= 1_500


def test_overflowing_account_growth_closes_the_gap():
    accounts = [Account(balance=1_000, is_investment=True, interest_rate_pa=1000)]
    result = project_contribution(accounts, 1_000_000, date(2125, 1, 1), 8, None, now=NOW)

    assert result.future_value_of_current_holdings == math.inf
    assert result.gap_to_target == 0
    assert result.monthly_contribution_needed == 0
    assert result.on_track


def test_negligible_default_rate_spreads_gap_evenly():
    result = project_contribution([], 1_000_000, TEN_YEARS_OUT, 1e-18, None, now=NOW)

    assert isclose(
        result.monthly_contribution_needed, 1_000_000 / (12 * result.years_remaining)
    )
