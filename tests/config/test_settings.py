"""Tests for EvaluatorSettings."""

import pytest
from pydantic import ValidationError

from protoslots.config import EvaluatorSettings


def test_defaults(monkeypatch):
    for name in ("PROTOSLOTS_PARAMETER_SLOT", "PROTOSLOTS_MAX_DEPTH", "PROTOSLOTS_TRACE_CAPACITY"):
        monkeypatch.delenv(name, raising=False)

    settings = EvaluatorSettings(_env_file=None)

    assert settings.parameter_slot == "parameter"
    assert settings.max_depth is None
    assert settings.trace_capacity == 1000


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PROTOSLOTS_PARAMETER_SLOT", "arg")
    monkeypatch.setenv("PROTOSLOTS_MAX_DEPTH", "64")
    monkeypatch.setenv("PROTOSLOTS_TRACE_CAPACITY", "10")

    settings = EvaluatorSettings(_env_file=None)

    assert settings.parameter_slot == "arg"
    assert settings.max_depth == 64
    assert settings.trace_capacity == 10


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("PROTOSLOTS_MAX_DEPTH", "64")
    settings = EvaluatorSettings(_env_file=None, max_depth=8)
    assert settings.max_depth == 8


@pytest.mark.parametrize(
    "kwargs",
    [{"max_depth": 0}, {"trace_capacity": 0}, {"parameter_slot": ""}],
)
def test_rejects_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        EvaluatorSettings(_env_file=None, **kwargs)
