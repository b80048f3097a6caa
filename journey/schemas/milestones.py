"""Data contracts for milestone progress."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from journey.models import MilestoneProgress


class MilestoneRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    currentAmount: float
    milestones: Optional[List[float]] = Field(
        default=None,
        description="Custom milestone amounts in USD. Omitted means the standard ladder.",
    )


class MilestoneResponse(BaseModel):
    milestones: List[MilestoneProgress]
