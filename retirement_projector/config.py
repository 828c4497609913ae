"""
Service configuration.
Projection constants live in calculators/projection.py (ProjectionOptions).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .calculators.projection import ProjectionOptions
from .calculators.returns import SamplerPolicy


@dataclass(frozen=True)
class ServiceConfig:
    host: str = "127.0.0.1"
    port: int = 3030
    path: str = "/ws"

    # market return sampling; seed=None draws fresh entropy per connection
    sampler_policy: SamplerPolicy = SamplerPolicy.RANDOM
    seed: Optional[int] = None

    projection: ProjectionOptions = field(default_factory=ProjectionOptions)

    @property
    def url(self) -> str:
        return f"ws://{self.host}:{self.port}{self.path}"
