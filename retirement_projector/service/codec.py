"""JSON codec for the WebSocket protocol.

Inbound frames are parsed into :class:`SimulationRequest`; results are
written back as::

    {"status": "simulation completed",
     "results": {"processed": [{"year": 2025, "age": 60, "savings": ...}, ...]}}

Anything that fails to parse against the schema is answered with
``{"error": "invalid JSON"}``.
"""

from __future__ import annotations

import json
from typing import Union

from pydantic import ValidationError

from ..calculators.projection import SimulationResult
from ..models import SimulationRequest

STATUS_COMPLETED = "simulation completed"
INVALID_JSON = "invalid JSON"


class RequestError(ValueError):
    """Raised when an inbound message does not match the request schema."""

    def __init__(self, cause: Exception):
        super().__init__(f"{INVALID_JSON}: {cause}")
        self.cause = cause


def decode_request(text: Union[str, bytes]) -> SimulationRequest:
    try:
        return SimulationRequest.model_validate_json(text)
    except ValidationError as exc:
        raise RequestError(exc) from exc


def encode_result(result: SimulationResult) -> str:
    return json.dumps({"status": STATUS_COMPLETED, "results": {"processed": result.to_dicts()}})


def encode_error() -> str:
    return json.dumps({"error": INVALID_JSON})


__all__ = ["RequestError", "decode_request", "encode_result", "encode_error", "STATUS_COMPLETED", "INVALID_JSON"]
