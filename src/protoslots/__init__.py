"""protoslots: a prototype-based object model with message dispatch.

Usage:
    from protoslots import SlotObject, evaluate, dispatch_with_parameter
    from protoslots.lib import box, make_increment

    base = SlotObject()
    base.assign_slot("greeting", box("hello"))

    child = SlotObject()
    child.assign_parent_slot("proto", base)
    child.messages.append("greeting")

    evaluate(child).primitive  # "hello", found on the parent

    n = box(5)
    n.assign_slot("increment", make_increment())
    dispatch_with_parameter(n, "increment", n).primitive  # 6
"""

__version__ = "0.1.0"

# Configuration
from protoslots.config import EvaluatorSettings

# Core primitives
from protoslots.core import (
    Copy,
    FunctionComputation,
    NativeComputation,
    ObjectId,
    ObjectKind,
    SlotObject,
    describe,
    native,
    snapshot,
)

# Built-in computations
from protoslots.lib import box, install_arithmetic, install_operator, make_increment

# Runtime
from protoslots.runtime import (
    EvaluationDepthError,
    Evaluator,
    MessageNotFoundError,
    ProtoSlotsError,
    SlotLookup,
    dispatch,
    dispatch_with_parameter,
    evaluate,
    find_slot,
    get_default_evaluator,
    set_default_evaluator,
)

# Tracing (optional)
from protoslots.tracing import DispatchRecord, InMemoryTraceStore, TraceStore

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "ObjectId",
    "SlotObject",
    "ObjectKind",
    "NativeComputation",
    "FunctionComputation",
    "native",
    "describe",
    "snapshot",
    # Runtime
    "Evaluator",
    "evaluate",
    "dispatch",
    "dispatch_with_parameter",
    "get_default_evaluator",
    "set_default_evaluator",
    "find_slot",
    "SlotLookup",
    "ProtoSlotsError",
    "MessageNotFoundError",
    "EvaluationDepthError",
    # Config
    "EvaluatorSettings",
    # Built-ins
    "box",
    "make_increment",
    "install_operator",
    "install_arithmetic",
    # Tracing
    "TraceStore",
    "DispatchRecord",
    "InMemoryTraceStore",
]
