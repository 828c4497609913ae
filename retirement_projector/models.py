"""Inbound request schema shared by the projection engine and the codec."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

SIMULATE_ACTION = "simulate"

# Amounts must fit a signed 64-bit integer.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
MAX_REQUEST_AGE = 150


class SimulationRequest(BaseModel):
    """One client message describing the financial situation to project."""

    model_config = ConfigDict(frozen=True)

    age: int = Field(..., ge=0, le=MAX_REQUEST_AGE, description="Current age in whole years.")
    current_savings: int = Field(
        ...,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Savings balance, or the yearly contribution depending on the contribution mode.",
    )
    current_salary: int = Field(..., ge=0, le=INT64_MAX, description="Current annual salary.")
    retirement_expenses: int = Field(..., ge=0, le=INT64_MAX, description="Annual spending once retired.")
    action: str = Field(..., description='Only "simulate" runs the engine.')
    value: Optional[str] = Field(None, description="Reserved for future use.")

    @property
    def is_simulation(self) -> bool:
        return self.action == SIMULATE_ACTION


__all__ = ["SimulationRequest", "SIMULATE_ACTION"]
