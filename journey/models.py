from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CZK = "CZK"
    JPY = "JPY"
    CHF = "CHF"
    CAD = "CAD"
    AUD = "AUD"


BASE_CURRENCY = Currency.USD

DateLike = Union[datetime, date]


class Account(BaseModel):
    """A balance held somewhere, as the engine sees it.

    ``interest_rate_pa`` is an annual percentage. ``None`` means the user
    never set one: investment accounts then grow at the default rate.
    An explicit ``0`` means no growth.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Optional[str] = None
    name: str = ""
    institution: Optional[str] = None
    balance: float = 0.0
    currency: Currency = BASE_CURRENCY
    is_investment: bool = False
    interest_rate_pa: Optional[float] = Field(default=None, ge=0)
    is_active: bool = True


class TimeRemaining(NamedTuple):
    months: int
    years: float


@dataclass(frozen=True)
class Holdings:
    total: float
    investments: float
    cash: float


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    # current state
    current_net_worth_usd: float = Field(serialization_alias="currentNetWorthUSD")
    current_investments_usd: float = Field(serialization_alias="currentInvestmentsUSD")
    current_cash_usd: float = Field(serialization_alias="currentCashUSD")

    # projections
    projected_net_worth_usd: float = Field(serialization_alias="projectedNetWorthUSD")
    future_value_of_current_holdings: float = Field(
        serialization_alias="futureValueOfCurrentHoldings"
    )

    gap_to_target: float = Field(serialization_alias="gapToTarget")
    monthly_contribution_needed: float = Field(serialization_alias="monthlyContributionNeeded")

    # timeline
    months_remaining: int = Field(serialization_alias="monthsRemaining")
    years_remaining: float = Field(serialization_alias="yearsRemaining")
    target_date: DateLike = Field(serialization_alias="targetDate")
    target_amount: float = Field(serialization_alias="targetAmount")

    progress_percentage: float = Field(serialization_alias="progressPercentage")
    on_track: bool = Field(serialization_alias="onTrack")


class TimelinePoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    date: datetime
    projected_value: float = Field(serialization_alias="projectedValue")


class MilestoneProgress(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: float
    percentage: float
    remaining: float
    achieved: bool
