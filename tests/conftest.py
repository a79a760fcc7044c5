"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from protoslots import Evaluator, EvaluatorSettings, SlotObject, set_default_evaluator
from protoslots.lib import box


@pytest.fixture(autouse=True)
def reset_default_evaluator():
    """Module-level helpers get a fresh evaluator per test."""
    set_default_evaluator(None)
    yield
    set_default_evaluator(None)


@pytest.fixture
def evaluator():
    """Evaluator with default settings, independent of the environment."""
    return Evaluator(settings=EvaluatorSettings(_env_file=None))


@pytest.fixture
def diamond():
    """A -> (B, C), B -> D, C -> D. None of them define "x"."""
    a, b, c, d = SlotObject(), SlotObject(), SlotObject(), SlotObject()
    d.assign_slot("only_on_d", box("d"))
    b.assign_parent_slot("d", d)
    c.assign_parent_slot("d", d)
    a.assign_parent_slot("b", b)
    a.assign_parent_slot("c", c)
    return a, b, c, d
