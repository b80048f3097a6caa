"""Data contracts for the projection endpoints."""

from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from journey.models import Account, TimelinePoint


class ProjectionRequest(BaseModel):
    """Accounts plus the goal; anything omitted falls back to the configured defaults."""

    model_config = ConfigDict(extra="forbid")

    accounts: List[Account] = Field(default_factory=list)
    targetAmount: Optional[float] = None
    targetDate: Optional[date] = None
    defaultGrowthRate: Optional[float] = Field(default=None, ge=0, le=100)
    rates: Optional[Dict[str, float]] = Field(
        default=None,
        description="Units of each currency per 1 USD. Omitted means the fallback snapshot.",
    )
    now: Optional[datetime] = Field(
        default=None,
        description="Valuation moment, mostly for reproducible results. Defaults to the server clock.",
    )


class TimelineRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    accounts: List[Account] = Field(default_factory=list)
    monthlyContribution: float = Field(0.0, ge=0)
    years: int = Field(10, ge=0, le=100)
    investmentRate: Optional[float] = Field(default=None, ge=0, le=100)
    rates: Optional[Dict[str, float]] = None
    now: Optional[datetime] = None


class TimelineResponse(BaseModel):
    points: List[TimelinePoint]


class YearsToTargetRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    currentAmount: float
    monthlyContribution: float = 0.0
    targetAmount: Optional[float] = None
    annualRate: Optional[float] = Field(default=None, ge=0, le=100)


class YearsToTargetResponse(BaseModel):
    years: Optional[float]
    reachable: bool
