"""Retirement savings projection service.

Clients connect over a WebSocket, send their age, savings, salary and planned
retirement spending, and receive a year-by-year projection of their savings
through age 99.
"""

from .calculators.projection import ProjectionOptions, SimulationResult, YearlyRecord, project
from .calculators.returns import ReturnSampler, SamplerPolicy, default_return_table, make_sampler
from .config import ServiceConfig
from .models import SimulationRequest

__version__ = "0.1.0"

__all__ = [
    "ProjectionOptions",
    "SimulationResult",
    "YearlyRecord",
    "project",
    "ReturnSampler",
    "SamplerPolicy",
    "default_return_table",
    "make_sampler",
    "ServiceConfig",
    "SimulationRequest",
]
