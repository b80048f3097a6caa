"""Net-worth projection: how much to save each month to hit the goal on time."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional, Sequence

import structlog

from journey.constants import (
    DEFAULT_INVESTMENT_INTEREST_RATE,
    MILESTONES,
    ON_TRACK_CONTRIBUTION_RATIO,
    TARGET_AMOUNT_USD,
    TARGET_DATE,
)
from journey.core.currency import ExchangeRates, to_base
from journey.core.holdings import aggregate_holdings
from journey.core.timevalue import (
    future_value,
    future_value_of_payments,
    required_monthly_payment,
    time_remaining,
)
from journey.models import (
    Account,
    CalculationResult,
    DateLike,
    MilestoneProgress,
    TimelinePoint,
)

logger = structlog.get_logger(__name__)


def _progress(current: float, target: float) -> float:
    if target == 0:
        return 0.0
    return current / target * 100


def project_contribution(
    accounts: Iterable[Account],
    target_amount: float = TARGET_AMOUNT_USD,
    target_date: DateLike = TARGET_DATE,
    default_growth_rate: float = DEFAULT_INVESTMENT_INTEREST_RATE,
    rates: Optional[ExchangeRates] = None,
    now: Optional[DateLike] = None,
    on_track_ratio: float = ON_TRACK_CONTRIBUTION_RATIO,
) -> CalculationResult:
    """
    Build the dashboard projection for a set of accounts.

    Order of operations:
      1) Current holdings in USD, split into investments and cash.
      2) Grow each account on its own to the target date (investments at their
         own rate or the default, interest-bearing cash at its rate, plain
         cash flat) and sum: the future value of today's holdings.
      3) Gap = what that future value still falls short of the target.
      4) Level monthly contribution, invested at the default rate, that
         closes the gap by the target date.

    ``on_track`` is a heuristic: nothing more to save, or the monthly amount
    is below ``on_track_ratio`` of current net worth.
    """
    accounts = list(accounts)
    months_remaining, years_remaining = time_remaining(target_date, now)
    holdings = aggregate_holdings(accounts, rates)

    # target date reached or passed: report where things stand
    if years_remaining <= 0:
        return CalculationResult(
            current_net_worth_usd=holdings.total,
            current_investments_usd=holdings.investments,
            current_cash_usd=holdings.cash,
            projected_net_worth_usd=holdings.total,
            future_value_of_current_holdings=holdings.total,
            gap_to_target=max(0.0, target_amount - holdings.total),
            monthly_contribution_needed=0.0,
            months_remaining=0,
            years_remaining=0.0,
            target_date=target_date,
            target_amount=target_amount,
            progress_percentage=_progress(holdings.total, target_amount),
            on_track=holdings.total >= target_amount,
        )

    future_value_of_holdings = 0.0
    for account in accounts:
        balance_usd = to_base(account.balance, account.currency, rates)
        if account.is_investment:
            rate = (
                default_growth_rate
                if account.interest_rate_pa is None
                else account.interest_rate_pa
            )
            future_value_of_holdings += future_value(balance_usd, rate, years_remaining)
        elif (account.interest_rate_pa or 0) > 0:
            # savings accounts still earn their stated interest
            future_value_of_holdings += future_value(
                balance_usd, account.interest_rate_pa, years_remaining
            )
        else:
            future_value_of_holdings += balance_usd

    gap = max(0.0, target_amount - future_value_of_holdings)
    monthly = (
        required_monthly_payment(gap, default_growth_rate, years_remaining) if gap > 0 else 0.0
    )
    future_value_of_contributions = future_value_of_payments(
        monthly, default_growth_rate, years_remaining
    )

    on_track = monthly <= 0 or (
        holdings.total > 0 and monthly < holdings.total * on_track_ratio
    )

    result = CalculationResult(
        current_net_worth_usd=holdings.total,
        current_investments_usd=holdings.investments,
        current_cash_usd=holdings.cash,
        projected_net_worth_usd=future_value_of_holdings + future_value_of_contributions,
        future_value_of_current_holdings=future_value_of_holdings,
        gap_to_target=gap,
        monthly_contribution_needed=monthly,
        months_remaining=months_remaining,
        years_remaining=years_remaining,
        target_date=target_date,
        target_amount=target_amount,
        progress_percentage=_progress(holdings.total, target_amount),
        on_track=on_track,
    )
    logger.debug(
        "projection_computed",
        accounts=len(accounts),
        years_remaining=round(years_remaining, 2),
        gap=round(gap, 2),
        monthly=round(monthly, 2),
        on_track=on_track,
    )
    return result


def _add_years(moment: datetime, years: int) -> datetime:
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        # 29 February into a non-leap year
        return moment.replace(year=moment.year + years, day=28)


def projection_timeline(
    accounts: Iterable[Account],
    monthly_contribution: float,
    years: int = 10,
    investment_rate: float = DEFAULT_INVESTMENT_INTEREST_RATE,
    rates: Optional[ExchangeRates] = None,
    now: Optional[datetime] = None,
) -> List[TimelinePoint]:
    """
    Year-by-year projected net worth from today (year 0) to ``years``.

    Investments compound at ``investment_rate``, cash stays flat, and the
    monthly contribution is invested at the same rate.
    """
    holdings = aggregate_holdings(accounts, rates)
    start = now or datetime.now()

    points: List[TimelinePoint] = []
    for year in range(0, max(0, years) + 1):
        fv_holdings = future_value(holdings.investments, investment_rate, year) + holdings.cash
        fv_contributions = future_value_of_payments(monthly_contribution, investment_rate, year)
        points.append(
            TimelinePoint(
                year=year,
                date=_add_years(start, year),
                projected_value=fv_holdings + fv_contributions,
            )
        )
    return points


def milestone_progress(current_amount: float, milestone_amount: float) -> MilestoneProgress:
    if milestone_amount == 0:
        percentage = 100.0
    else:
        percentage = min(100.0, current_amount / milestone_amount * 100)
    return MilestoneProgress(
        amount=milestone_amount,
        percentage=percentage,
        remaining=max(0.0, milestone_amount - current_amount),
        achieved=current_amount >= milestone_amount,
    )


def milestone_ladder(
    current_amount: float, milestones: Sequence[float] = MILESTONES
) -> List[MilestoneProgress]:
    return [milestone_progress(current_amount, amount) for amount in sorted(milestones)]
