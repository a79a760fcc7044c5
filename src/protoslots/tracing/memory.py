"""Bounded in-memory trace store."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from protoslots.tracing.models import DispatchRecord

if TYPE_CHECKING:
    from protoslots.config import EvaluatorSettings


class InMemoryTraceStore:
    """Keeps the most recent dispatch records in a FIFO buffer.

    Args:
        max_records: Records kept before the oldest are evicted.
    """

    def __init__(self, max_records: int = 1000) -> None:
        if max_records < 1:
            raise ValueError(f"max_records must be at least 1, got {max_records}")
        self._records: deque[DispatchRecord] = deque(maxlen=max_records)

    @classmethod
    def from_settings(cls, settings: EvaluatorSettings) -> InMemoryTraceStore:
        return cls(max_records=settings.trace_capacity)

    def record(self, record: DispatchRecord) -> None:
        self._records.append(record)

    def records(self, message: str | None = None) -> list[DispatchRecord]:
        if message is None:
            return list(self._records)
        return [r for r in self._records if r.message == message]

    def clear(self) -> None:
        self._records.clear()

    @property
    def count(self) -> int:
        return len(self._records)
