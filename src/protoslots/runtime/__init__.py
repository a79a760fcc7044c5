"""Evaluation runtime: message dispatch, inheritance search and errors.

Architecture Note:
    runtime/ is the stateful layer. Evaluator instances carry settings, a
    nesting counter and an optional trace store; core/ objects carry none.
"""

from protoslots.runtime.evaluator import (
    EvaluationDepthError,
    Evaluator,
    MessageNotFoundError,
    ProtoSlotsError,
    dispatch,
    dispatch_with_parameter,
    evaluate,
    get_default_evaluator,
    set_default_evaluator,
)
from protoslots.runtime.resolver import SlotLookup, find_slot, iter_ancestors

__all__ = [
    "Evaluator",
    "ProtoSlotsError",
    "MessageNotFoundError",
    "EvaluationDepthError",
    "evaluate",
    "dispatch",
    "dispatch_with_parameter",
    "get_default_evaluator",
    "set_default_evaluator",
    "SlotLookup",
    "find_slot",
    "iter_ancestors",
]
