"""Protocols for tracing infrastructure.

These protocols define the interface for dispatch trace backends, allowing
different implementations (in-memory, file, database).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from protoslots.tracing.models import DispatchRecord


@runtime_checkable
class TraceStore(Protocol):
    """Protocol for storing dispatch records.

    Usage:
        store = InMemoryTraceStore(max_records=100)
        evaluator = Evaluator(trace=store)
        evaluator.evaluate(obj)

        for record in store.records(message="increment"):
            print(record.holder, record.depth)
    """

    def record(self, record: DispatchRecord) -> None:
        """Store a dispatch record.

        Note:
            Implementations may have bounded storage. Older records may be
            evicted when the limit is reached.
        """
        ...

    def records(self, message: str | None = None) -> list[DispatchRecord]:
        """Get stored records in dispatch order.

        Args:
            message: Only return records for this message name.
        """
        ...

    def clear(self) -> None:
        """Clear all stored records."""
        ...

    @property
    def count(self) -> int:
        """Number of records currently stored."""
        ...
