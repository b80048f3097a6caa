"""Data contracts for currency conversion and net worth."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from journey.models import BASE_CURRENCY, Account, Currency


class ConversionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    amount: float
    source: Currency
    target: Currency = BASE_CURRENCY
    rates: Optional[Dict[str, float]] = None


class ConversionResponse(BaseModel):
    amount: float
    rate: Optional[float] = Field(
        default=None,
        description="Target units per source unit; null when the snapshot lacks either currency.",
    )


class NetWorthRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    accounts: List[Account] = Field(default_factory=list)
    rates: Optional[Dict[str, float]] = None


class NetWorthResponse(BaseModel):
    totals: Dict[Currency, float]
