"""Tracing infrastructure for recording message dispatch.

Usage:
    from protoslots import Evaluator
    from protoslots.tracing import InMemoryTraceStore

    store = InMemoryTraceStore(max_records=500)
    evaluator = Evaluator(trace=store)
"""

from protoslots.tracing.memory import InMemoryTraceStore
from protoslots.tracing.models import DispatchRecord
from protoslots.tracing.protocol import TraceStore

__all__ = [
    "TraceStore",
    "DispatchRecord",
    "InMemoryTraceStore",
]
