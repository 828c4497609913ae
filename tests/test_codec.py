"""Tests for request decoding and response encoding."""

import json

import pytest
from pydantic import ValidationError

from retirement_projector.calculators.projection import SimulationResult, YearlyRecord
from retirement_projector.service import codec


def _payload(**overrides) -> str:
    fields = {
        "age": 65,
        "current_savings": 250000,
        "current_salary": 80000,
        "retirement_expenses": 45000,
        "action": "simulate",
    }
    fields.update(overrides)
    return json.dumps(fields)


def test_decode_request():
    req = codec.decode_request(_payload(value="extra"))
    assert req.age == 65
    assert req.current_savings == 250000
    assert req.is_simulation
    assert req.value == "extra"


def test_decode_allows_negative_savings_and_missing_value():
    req = codec.decode_request(_payload(current_savings=-1000))
    assert req.current_savings == -1000
    assert req.value is None


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[1, 2, 3]",
        json.dumps({"current_savings": 1, "current_salary": 1, "retirement_expenses": 1, "action": "simulate"}),
        _payload(age="sixty"),
        _payload(current_salary=-1),
    ],
)
def test_decode_rejects_malformed(text):
    with pytest.raises(codec.RequestError):
        codec.decode_request(text)


def test_request_is_immutable():
    req = codec.decode_request(_payload())
    with pytest.raises(ValidationError):
        req.age = 70


def test_encode_result_omits_untracked_fields():
    result = SimulationResult((YearlyRecord(2025, 65, 1000, 0, 0), YearlyRecord(2026, 66, 1100)))
    assert json.loads(codec.encode_result(result)) == {
        "status": "simulation completed",
        "results": {
            "processed": [
                {"year": 2025, "age": 65, "savings": 1000, "ss_payment": 0, "rmd_withdrawal": 0},
                {"year": 2026, "age": 66, "savings": 1100},
            ]
        },
    }


def test_encode_error():
    assert json.loads(codec.encode_error()) == {"error": "invalid JSON"}


@pytest.mark.parametrize(
    "overrides",
    [
        {"current_savings": int("9" * 400)},
        {"current_savings": -(2**63) - 1},
        {"current_salary": 2**63},
        {"retirement_expenses": int("9" * 400)},
        {"age": 151},
    ],
)
def test_decode_rejects_out_of_range_integers(overrides):
    with pytest.raises(codec.RequestError):
        codec.decode_request(_payload(**overrides))


def test_decode_accepts_64_bit_extremes():
    req = codec.decode_request(_payload(current_savings=-(2**63)))
    assert req.current_savings == -(2**63)
